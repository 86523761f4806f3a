"""
GS1 Pharma Scan Decoder

Entry point that turns a raw scanned string into a map of AI -> raw value.

Two input shapes are accepted:
- Concatenated: raw scanner output, fields back-to-back, optional GS (ASCII 29)
  after variable-length fields
- Parenthesized: human transcription such as (01)...(17)...(10)...(21)...

Any "(" together with any ")" selects the parenthesized decoder. This is a
content sniff, not a grammar check.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .ai_table import GS
from .concatenated_parser import parse_concatenated
from .parenthesized_parser import parse_parenthesized


logger = logging.getLogger(__name__)


class ScanFormat(str, Enum):
    """Detected shape of the scanned string."""
    CONCATENATED = "concatenated"
    PARENTHESIZED = "parenthesized"


@dataclass
class DecodeResult:
    """
    Complete result of decoding a scan.

    Attributes:
        raw: Original input string
        normalized: Input after trimming, symbology removal and GS normalization
        format: Which decoder was used
        fields: AI -> raw value, in order of appearance
        trailing: Unconsumed characters after the last field (concatenated only)
        skipped_ais: Unsupported AIs dropped (parenthesized only)
        gs_seen: True if GS separators were present after normalization
        symbology_identifier: Stripped symbology name, if any
    """
    raw: str
    normalized: str
    format: ScanFormat
    fields: Dict[str, str] = field(default_factory=dict)
    trailing: str = ""
    skipped_ais: List[str] = field(default_factory=list)
    gs_seen: bool = False
    symbology_identifier: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'raw': self.raw,
            'normalized': self.normalized,
            'format': self.format.value,
            'fields': dict(self.fields),
            'trailing': self.trailing,
            'skipped_ais': list(self.skipped_ais),
            'gs_seen': self.gs_seen,
            'symbology_identifier': self.symbology_identifier,
        }


# Symbology identifier patterns (ISO/IEC 15424)
SYMBOLOGY_PATTERNS = [
    (r'^\]d2', 'GS1 DataMatrix'),        # ]d2
    (r'^\]C1', 'GS1-128'),               # ]C1
    (r'^\]e0', 'GS1 DataBar'),           # ]e0
    (r'^\]Q3', 'GS1 QR Code'),           # ]Q3
]

SYMBOLOGY_REGEX = [(re.compile(p, re.IGNORECASE), name) for p, name in SYMBOLOGY_PATTERNS]

# Text stand-ins for FNC1/GS produced by keyboard wedges and copy/paste
GS_TEXT_PATTERN = re.compile(r'\\u001d|<GS>|<FNC1>|\{GS\}', re.IGNORECASE)


def strip_symbology(text: str) -> Tuple[str, Optional[str]]:
    """
    Strip a symbology identifier prefix if present.

    Returns:
        (stripped_text, identifier_name)
    """
    for pattern, name in SYMBOLOGY_REGEX:
        match = pattern.match(text)
        if match:
            return text[match.end():], name
    return text, None


def normalize_scan(raw: Optional[str]) -> Tuple[str, Optional[str]]:
    """
    Normalize a scanned string.

    - Trims whitespace (CR/LF from keyboard-wedge scanners)
    - Strips a leading symbology identifier
    - Converts text representations of GS to ASCII 29

    Returns:
        (normalized_text, symbology_identifier)
    """
    text = (raw or "").strip()
    text, symbology = strip_symbology(text)
    text = GS_TEXT_PATTERN.sub(GS, text)
    return text, symbology


def detect_format(text: str) -> ScanFormat:
    if "(" in text and ")" in text:
        return ScanFormat.PARENTHESIZED
    return ScanFormat.CONCATENATED


def decode(raw: Optional[str]) -> DecodeResult:
    """
    Decode a scanned string into its GS1 fields.

    Never raises for malformed input; unrecognised data is left out of
    ``fields`` and reported through ``trailing`` / ``skipped_ais``.

    Args:
        raw: Raw scan text

    Returns:
        DecodeResult
    """
    normalized, symbology = normalize_scan(raw)
    scan_format = detect_format(normalized)
    logger.debug("Decoding %s scan %r", scan_format.value, normalized)

    result = DecodeResult(
        raw=raw or "",
        normalized=normalized,
        format=scan_format,
        symbology_identifier=symbology,
    )

    if scan_format is ScanFormat.PARENTHESIZED:
        parsed = parse_parenthesized(normalized)
        result.fields = parsed.fields
        result.skipped_ais = parsed.skipped_ais
        result.gs_seen = GS in normalized
    else:
        parsed = parse_concatenated(normalized)
        result.fields = parsed.fields
        result.trailing = parsed.trailing
        result.gs_seen = parsed.gs_seen

    return result


def parse_gs1(raw: Optional[str]) -> Dict[str, str]:
    """
    Decode a scanned string and return only the AI -> value map.

    Example:
        >>> parse_gs1("(01)08699550011111(21)0000000000010158(10)173350(17)271229")
        {'01': '08699550011111', '21': '0000000000010158', '10': '173350', '17': '271229'}
    """
    return decode(raw).fields
