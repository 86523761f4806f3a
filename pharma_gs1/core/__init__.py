"""
Core decoding modules for pharma GS1 scans.
"""

from .ai_table import AI_TABLE, AIDefinition, FixedLength, VariableLength, detect_ai
from .parser import decode, parse_gs1, detect_format, normalize_scan, DecodeResult, ScanFormat
from .concatenated_parser import parse_concatenated, ConcatenatedParseResult
from .parenthesized_parser import parse_parenthesized, ParenthesizedParseResult

__all__ = [
    "AI_TABLE",
    "AIDefinition",
    "FixedLength",
    "VariableLength",
    "detect_ai",
    "decode",
    "parse_gs1",
    "detect_format",
    "normalize_scan",
    "DecodeResult",
    "ScanFormat",
    "parse_concatenated",
    "ConcatenatedParseResult",
    "parse_parenthesized",
    "ParenthesizedParseResult",
]
