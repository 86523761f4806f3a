"""
Output formatters for pharma scans.
"""

from .json_formatter import (
    format_fields,
    validate_to_dict,
    validate_to_json,
)

__all__ = [
    "format_fields",
    "validate_to_dict",
    "validate_to_json",
]
