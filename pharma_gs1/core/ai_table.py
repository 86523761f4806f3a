"""
Application Identifier table for pharmaceutical GS1 scans.

Only the four AIs printed on pharma DataMatrix codes are supported:

- (01) GTIN, 13 or 14 digits (13-digit GTINs appear on older packaging)
- (17) Expiry date, YYMMDD
- (10) Batch/Lot, up to 20 characters
- (21) Serial, up to 20 characters

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union


GS = "\x1d"  # ASCII 29, FNC1 as transmitted by scanners

MIN_AI_LENGTH = 2
MAX_AI_LENGTH = 4


@dataclass(frozen=True)
class FixedLength:
    """Data length is predefined; no separator follows the field."""
    length: int


@dataclass(frozen=True)
class VariableLength:
    """Data runs until a GS, the next AI, or max_length characters."""
    max_length: int
    min_length: int = 1


LengthKind = Union[FixedLength, VariableLength]


@dataclass(frozen=True)
class AIDefinition:
    """
    Definition of a supported Application Identifier.

    Attributes:
        ai: The AI code (2-4 digits)
        title: GS1 title
        field_name: Human-readable name used in formatted output
        kind: FixedLength or VariableLength
    """
    ai: str
    title: str
    field_name: str
    kind: LengthKind


GTIN = "01"
EXPIRY = "17"
LOT = "10"
SERIAL = "21"

GTIN_LENGTHS = (13, 14)

AI_TABLE: Dict[str, AIDefinition] = {
    GTIN: AIDefinition(
        ai=GTIN,
        title="GTIN",
        field_name="GTIN Code",
        kind=VariableLength(max_length=14, min_length=13),
    ),
    EXPIRY: AIDefinition(
        ai=EXPIRY,
        title="USE BY or EXPIRY",
        field_name="Expiry Date",
        kind=FixedLength(length=6),
    ),
    LOT: AIDefinition(
        ai=LOT,
        title="BATCH/LOT",
        field_name="Batch/Lot Number",
        kind=VariableLength(max_length=20),
    ),
    SERIAL: AIDefinition(
        ai=SERIAL,
        title="SERIAL",
        field_name="Serial Number",
        kind=VariableLength(max_length=20),
    ),
}


def is_supported(ai: str) -> bool:
    return ai in AI_TABLE


def detect_ai(text: str, index: int = 0) -> Optional[str]:
    """
    Detect a supported AI starting at ``index``.

    Widths are tried shortest first (2 -> 3 -> 4), so a 2-digit match wins.

    Returns:
        The AI code, or None if no supported AI starts here.
    """
    for width in range(MIN_AI_LENGTH, MAX_AI_LENGTH + 1):
        candidate = text[index:index + width]
        if len(candidate) < width:
            break
        if candidate in AI_TABLE:
            return candidate
    return None
