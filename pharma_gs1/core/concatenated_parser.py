"""
GS1 Concatenated Parser

Parses raw scanner output where fields are placed back-to-back:

- Fixed-length AIs are immediately followed by the next AI.
- Variable-length AIs end at a GS (ASCII 29) separator when the printer
  emitted one, otherwise at the next recognisable AI.

Without length prefixes the field boundaries are guessed from "does the next
chunk look like a known AI". Two compensations are applied:

- Inside a (21) Serial, an embedded "17" ends the serial even when a generic
  AI match would come later. Serials are long digit runs that often contain
  the expiry marker.
- Once (01) has been read, a further "01" inside (10)/(21) is data, not a
  second GTIN.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

from .ai_table import (
    AI_TABLE,
    EXPIRY,
    GS,
    GTIN,
    GTIN_LENGTHS,
    SERIAL,
    FixedLength,
    VariableLength,
    detect_ai,
)
from ..validators.validators import validate_gtin


logger = logging.getLogger(__name__)


@dataclass
class ConcatenatedParseResult:
    """
    Result of a concatenated scan.

    Attributes:
        fields: AI -> raw value, in order of appearance
        trailing: Characters left after the last recognised field
        gs_seen: True if the input contained GS separators
    """
    fields: Dict[str, str] = field(default_factory=dict)
    trailing: str = ""
    gs_seen: bool = False


class ConcatenatedParser:
    """
    Single left-to-right scan over a concatenated GS1 string.

    Stateless between calls; the position and the set of AIs seen so far
    live only for the duration of ``parse``.
    """

    def parse(self, text: str) -> ConcatenatedParseResult:
        """
        Parse a normalized concatenated element string.

        Args:
            text: Scanner data with GS as ASCII 29

        Returns:
            ConcatenatedParseResult
        """
        fields: Dict[str, str] = {}
        seen: Set[str] = set()
        length = len(text)
        pos = 0

        while pos < length:
            # FNC1 may also follow a fixed field
            if text[pos] == GS:
                pos += 1
                continue

            ai = detect_ai(text, pos)
            if ai is None:
                break

            data_start = pos + len(ai)
            seen.add(ai)
            kind = AI_TABLE[ai].kind

            if isinstance(kind, FixedLength):
                data_end = data_start + kind.length
                if data_end > length:
                    # Truncated fixed field is discarded
                    break
                value, next_pos = text[data_start:data_end], data_end
            elif ai == GTIN:
                value, next_pos = self._extract_gtin(text, data_start)
            elif isinstance(kind, VariableLength):
                value, next_pos = self._extract_variable(text, data_start, ai, kind, seen)
            else:
                raise TypeError(f"Unhandled length kind for AI({ai}): {kind!r}")

            logger.debug("AI(%s) at %d: %r", ai, pos, value)
            fields[ai] = value
            pos = next_pos

        trailing = text[pos:]
        if trailing:
            logger.debug("Dropping %d unrecognised trailing characters: %r", len(trailing), trailing)

        return ConcatenatedParseResult(
            fields=fields,
            trailing=trailing,
            gs_seen=GS in text,
        )

    def _extract_gtin(self, text: str, start: int) -> Tuple[str, int]:
        """
        Extract a 13- or 14-digit GTIN.

        A boundary is an offset (13 or 14) where a GS or another supported AI
        begins. When both offsets qualify, the reading whose Mod10 check digit
        is valid wins; otherwise the shorter one.

        A GS before offset 13 ends a short GTIN; it is consumed and kept out
        of the value.

        Returns:
            (value, next_position)
        """
        early_gs = text.find(GS, start, start + GTIN_LENGTHS[0])
        if early_gs != -1:
            return text[start:early_gs], early_gs + 1

        length = len(text)
        boundaries = []

        for size in GTIN_LENGTHS:
            end = start + size
            if end >= length:
                break
            if text[end] == GS:
                boundaries.append((size, end + 1))
                break
            next_ai = detect_ai(text, end)
            if next_ai is not None and next_ai != GTIN:
                boundaries.append((size, end))

        if len(boundaries) > 1:
            for size, next_pos in reversed(boundaries):
                if validate_gtin(text[start:start + size]):
                    return text[start:start + size], next_pos
        if boundaries:
            size, next_pos = boundaries[0]
            return text[start:start + size], next_pos

        # No boundary inside the window: consume up to 14, at least 13
        size = min(max(length - start, GTIN_LENGTHS[0]), GTIN_LENGTHS[-1])
        value = text[start:start + size]
        return value, start + len(value)

    def _extract_variable(
        self,
        text: str,
        start: int,
        ai: str,
        kind: VariableLength,
        seen: Set[str],
    ) -> Tuple[str, int]:
        """
        Extract a (10) Lot or (21) Serial value.

        The scan window ends at max_length or the first GS, whichever is
        closer. A GS terminator is consumed but not included in the value.

        Returns:
            (value, next_position)
        """
        length = len(text)
        window_end = min(length, start + kind.max_length)
        gs_index = text.find(GS, start, window_end)
        limit = gs_index if gs_index != -1 else window_end
        first_boundary = start + kind.min_length

        if ai == SERIAL:
            expiry_at = self._find_expiry_marker(text, first_boundary, limit)
            if expiry_at is not None:
                return text[start:expiry_at], expiry_at

        end = start
        while end < limit:
            if end >= first_boundary:
                next_ai = detect_ai(text, end)
                if next_ai is not None and not (next_ai == GTIN and GTIN in seen):
                    break
            end += 1

        next_pos = end
        if end < length and text[end] == GS:
            next_pos += 1

        return text[start:end], next_pos

    @staticmethod
    def _find_expiry_marker(text: str, start: int, limit: int) -> Optional[int]:
        """Position of the first "17" in [start, limit), or None."""
        index = text.find(EXPIRY, start, limit + 1)
        return None if index == -1 else index


def parse_concatenated(text: str) -> ConcatenatedParseResult:
    """
    Parse a concatenated (raw scanner) GS1 element string.

    Example:
        >>> result = parse_concatenated("0108699550011111172712291017335021123456")
        >>> result.fields
        {'01': '08699550011111', '17': '271229', '10': '173350', '21': '123456'}
    """
    return ConcatenatedParser().parse(text)
