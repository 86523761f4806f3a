"""
Parser for the human-readable (parenthesized) GS1 transcription.

Example: (01)08699550011111(21)0000000000010158(10)173350(17)271229

The parenthesized markers are trusted completely: no length enforcement and
no re-synchronisation. Values are returned verbatim.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List

from .ai_table import is_supported


logger = logging.getLogger(__name__)

# (AI) followed by everything up to the next "(" or end of string
PARENTHESIZED_AI = re.compile(r"\((\d{2,4})\)([^(]*)")


@dataclass
class ParenthesizedParseResult:
    fields: Dict[str, str] = field(default_factory=dict)
    skipped_ais: List[str] = field(default_factory=list)


def parse_parenthesized(text: str) -> ParenthesizedParseResult:
    """
    Parse a parenthesized GS1 string.

    Unsupported AI codes are skipped together with their value text; they are
    listed in ``skipped_ais``. Malformed markers yield a shorter or empty map.
    """
    result = ParenthesizedParseResult()

    for match in PARENTHESIZED_AI.finditer(text):
        ai, value = match.group(1), match.group(2)
        if not is_supported(ai):
            logger.debug("Skipping unsupported AI(%s) with value %r", ai, value)
            result.skipped_ais.append(ai)
            continue
        result.fields[ai] = value

    return result
