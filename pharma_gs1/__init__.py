"""
GS1 Pharma Scan Decoder and Validator

Decodes scanned pharmaceutical DataMatrix strings (raw concatenated scanner
output or parenthesized transcriptions) into GTIN (01), expiry (17),
lot (10) and serial (21), and validates them for production records.
"""

from .core.parser import decode, parse_gs1, DecodeResult, ScanFormat
from .validators.validators import validate_gtin, parse_expiry, format_expiry_display
from .pharma_validator import (
    pharma_validator,
    ValidatorOptions,
    PharmaError,
    PharmaScanOk,
    PharmaScanFailure,
    PharmaScanResult,
    DEFAULT_SETTINGS,
)
from .formatters.json_formatter import format_fields, validate_to_dict, validate_to_json

__version__ = "1.0.0"
__all__ = [
    "decode",
    "parse_gs1",
    "DecodeResult",
    "ScanFormat",
    "validate_gtin",
    "parse_expiry",
    "format_expiry_display",
    "pharma_validator",
    "ValidatorOptions",
    "PharmaError",
    "PharmaScanOk",
    "PharmaScanFailure",
    "PharmaScanResult",
    "DEFAULT_SETTINGS",
    "format_fields",
    "validate_to_dict",
    "validate_to_json",
]
