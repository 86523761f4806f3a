"""
JSON Formatter for pharma scans

Provides clean output for the scan handler and the CLI:
- Human-readable field names
- Expiry formatted as DD.MM.YYYY when valid
- Validation result in the {status, ...} contract
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from ..core.ai_table import AI_TABLE, EXPIRY
from ..pharma_validator import ValidatorOptions, pharma_validator
from ..validators.validators import format_expiry_display, parse_expiry


def format_fields(fields: Mapping[str, str]) -> Dict[str, str]:
    """
    Map decoded AI values to human-readable field names.

    Example:
        >>> format_fields({"01": "08699550011111", "17": "271229"})
        {'GTIN Code': '08699550011111', 'Expiry Date': '29.12.2027'}
    """
    output: Dict[str, str] = {}

    for ai, value in fields.items():
        field_name = AI_TABLE[ai].field_name if ai in AI_TABLE else f"AI({ai})"

        if ai == EXPIRY:
            expiry = parse_expiry(value)
            output[field_name] = format_expiry_display(expiry) if expiry else value
        else:
            output[field_name] = value

    return output


def validate_to_dict(
    barcode_data: Optional[str],
    options: Optional[ValidatorOptions] = None,
) -> Dict[str, Any]:
    return pharma_validator(barcode_data, options).to_dict()


def validate_to_json(
    barcode_data: Optional[str],
    options: Optional[ValidatorOptions] = None,
) -> str:
    """
    Validate a scan and return the result as JSON.

    Example:
        >>> print(validate_to_json("(01)08699550011111(17)271229"))
        {
          "status": false,
          "message": "Lot (10) eksik, Seri (21) eksik"
        }
    """
    return json.dumps(validate_to_dict(barcode_data, options), ensure_ascii=False, indent=2)
