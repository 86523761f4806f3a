"""
Pharma Scan Validator

Decodes a scanned pharma DataMatrix string and checks that GTIN (01),
expiry (17), lot (10) and serial (21) are all present and well formed.

Every field is checked on every call so the scan handler can show all
problems at once. Nothing here raises for malformed input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields as dataclass_fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .core.ai_table import AI_TABLE, EXPIRY, GTIN, LOT, SERIAL, VariableLength
from .core.parser import decode
from .validators.validators import parse_expiry, validate_gtin


logger = logging.getLogger(__name__)


class PharmaError(str, Enum):
    """Failure reasons reported by pharma_validator."""
    MISSING_GTIN = "MISSING_GTIN"
    INVALID_GTIN = "INVALID_GTIN"
    MISSING_EXPIRY = "MISSING_EXPIRY"
    INVALID_EXPIRY = "INVALID_EXPIRY"
    MISSING_LOT = "MISSING_LOT"
    INVALID_LOT_LENGTH = "INVALID_LOT_LENGTH"
    MISSING_SERIAL = "MISSING_SERIAL"
    INVALID_SERIAL_LENGTH = "INVALID_SERIAL_LENGTH"


MESSAGES: Dict[str, Dict[PharmaError, str]] = {
    "tr": {
        PharmaError.MISSING_GTIN: "GTIN (01) eksik",
        PharmaError.INVALID_GTIN: "GTIN (01) hatalı",
        PharmaError.MISSING_EXPIRY: "Son kullanma tarihi (17) eksik",
        PharmaError.INVALID_EXPIRY: "Son kullanma tarihi (17) hatalı",
        PharmaError.MISSING_LOT: "Lot (10) eksik",
        PharmaError.INVALID_LOT_LENGTH: "Lot (10) uzunluğu 1–20 olmalı",
        PharmaError.MISSING_SERIAL: "Seri (21) eksik",
        PharmaError.INVALID_SERIAL_LENGTH: "Seri (21) uzunluğu 1–20 olmalı",
    },
    "en": {
        PharmaError.MISSING_GTIN: "GTIN (01) missing",
        PharmaError.INVALID_GTIN: "GTIN (01) invalid",
        PharmaError.MISSING_EXPIRY: "Expiry date (17) missing",
        PharmaError.INVALID_EXPIRY: "Expiry date (17) invalid",
        PharmaError.MISSING_LOT: "Lot (10) missing",
        PharmaError.INVALID_LOT_LENGTH: "Lot (10) length must be 1-20",
        PharmaError.MISSING_SERIAL: "Serial (21) missing",
        PharmaError.INVALID_SERIAL_LENGTH: "Serial (21) length must be 1-20",
    },
}


DEFAULT_SETTINGS: Dict[str, Any] = {
    # Checksum stays off until confirmed: some printed GTINs fail Mod10
    "strict_gtin_checksum": False,
    "strict_lengths": False,
    "language": "tr",
}


@dataclass(frozen=True)
class ValidatorOptions:
    """
    Configuration options for pharma_validator.

    Attributes:
        strict_gtin_checksum: Report GTINs whose check digit fails
        strict_lengths: Report lot/serial values longer than 20 characters
            (only reachable through the parenthesized format)
        language: Message catalog, "tr" or "en"
    """
    strict_gtin_checksum: bool = DEFAULT_SETTINGS["strict_gtin_checksum"]
    strict_lengths: bool = DEFAULT_SETTINGS["strict_lengths"]
    language: str = DEFAULT_SETTINGS["language"]

    def __post_init__(self):
        if self.language not in MESSAGES:
            raise ValueError(
                f"Unsupported language {self.language!r}, expected one of {sorted(MESSAGES)}"
            )

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]]) -> "ValidatorOptions":
        """Build options from an application settings mapping, ignoring unknown keys."""
        known = {f.name for f in dataclass_fields(cls)}
        values = {key: value for key, value in (settings or {}).items() if key in known}
        return cls(**values)

    def message(self, error: PharmaError) -> str:
        return MESSAGES[self.language][error]


@dataclass(frozen=True)
class PharmaScanOk:
    """Successful scan. ``exp`` is YYYYMMDD."""
    gtin: str
    exp: str
    lot: str
    serial: str
    status: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'gtin': self.gtin,
            'exp': self.exp,
            'lot': self.lot,
            'serial': self.serial,
        }


@dataclass(frozen=True)
class PharmaScanFailure:
    """
    Failed scan.

    Attributes:
        message: All reasons joined with ", "
        errors: The individual failure codes, in check order
    """
    message: str
    errors: List[PharmaError] = field(default_factory=list)
    status: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'message': self.message,
        }


PharmaScanResult = Union[PharmaScanOk, PharmaScanFailure]


def _max_length(ai: str) -> int:
    kind = AI_TABLE[ai].kind
    if isinstance(kind, VariableLength):
        return kind.max_length
    return kind.length


def pharma_validator(
    raw: Optional[str],
    options: Optional[ValidatorOptions] = None,
) -> PharmaScanResult:
    """
    Decode and validate a pharma GS1 scan.

    Args:
        raw: Scanned string (concatenated or parenthesized)
        options: Validation policy; defaults to ValidatorOptions()

    Returns:
        PharmaScanOk or PharmaScanFailure

    Example:
        >>> pharma_validator("(01)08699550011111(21)0000000000010158(10)173350(17)271229").to_dict()
        {'status': True, 'gtin': '08699550011111', 'exp': '20271229', 'lot': '173350', 'serial': '0000000000010158'}
    """
    options = options or ValidatorOptions()
    fields = decode(raw).fields
    errors: List[PharmaError] = []

    gtin = fields.get(GTIN)
    if not gtin:
        errors.append(PharmaError.MISSING_GTIN)
    elif options.strict_gtin_checksum and not validate_gtin(gtin):
        errors.append(PharmaError.INVALID_GTIN)

    expiry = fields.get(EXPIRY)
    exp = None
    if not expiry:
        errors.append(PharmaError.MISSING_EXPIRY)
    else:
        exp = parse_expiry(expiry)
        if exp is None:
            errors.append(PharmaError.INVALID_EXPIRY)

    lot = fields.get(LOT)
    if not lot:
        errors.append(PharmaError.MISSING_LOT)
    elif options.strict_lengths and len(lot) > _max_length(LOT):
        errors.append(PharmaError.INVALID_LOT_LENGTH)

    serial = fields.get(SERIAL)
    if not serial:
        errors.append(PharmaError.MISSING_SERIAL)
    elif options.strict_lengths and len(serial) > _max_length(SERIAL):
        errors.append(PharmaError.INVALID_SERIAL_LENGTH)

    if errors:
        logger.debug("Scan rejected: %s", [e.value for e in errors])
        return PharmaScanFailure(
            message=", ".join(options.message(e) for e in errors),
            errors=errors,
        )

    return PharmaScanOk(gtin=gtin, exp=exp, lot=lot, serial=serial)
