"""
Field validators for pharma scans.
"""

from .validators import (
    validate_gtin,
    parse_expiry,
    format_expiry_display,
)

__all__ = [
    "validate_gtin",
    "parse_expiry",
    "format_expiry_display",
]
