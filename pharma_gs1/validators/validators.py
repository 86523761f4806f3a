"""
GS1 Field Validators

- GTIN Mod10 check digit (GTIN-13 and GTIN-14)
- Expiry date (AI 17, YYMMDD with DD=00 meaning end of month)

Validators never raise for malformed input; failure is returned as
False / None.
"""

from __future__ import annotations

import re
from calendar import monthrange
from typing import Optional


GTIN_PATTERN = re.compile(r'[0-9]{13,14}')
EXPIRY_PATTERN = re.compile(r'[0-9]{6}')
YYYYMMDD_PATTERN = re.compile(r'([0-9]{4})([0-9]{2})([0-9]{2})')


def validate_gtin(value: Optional[str]) -> bool:
    """
    Validate a GTIN check digit.

    A 13-digit GTIN is left-padded with "0" to GTIN-14. Over the first 13
    digits the weights run 1, 3, 1, ... from the most significant digit; the
    14th digit must equal (10 - sum mod 10) mod 10.
    """
    if not value or not GTIN_PATTERN.fullmatch(value):
        return False

    gtin14 = value.zfill(14)
    total = sum(
        int(digit) * (1 if i % 2 == 0 else 3)
        for i, digit in enumerate(gtin14[:13])
    )
    return (10 - (total % 10)) % 10 == int(gtin14[13])


def parse_expiry(value: Optional[str]) -> Optional[str]:
    """
    Parse an AI(17) expiry date.

    Format is YYMMDD with year 2000 + YY. Day "00" is the GS1 convention for
    "end of month" and is normalized to the last calendar day.

    Args:
        value: 6-digit date string

    Returns:
        YYYYMMDD string, or None if the date is invalid
    """
    if not value or not EXPIRY_PATTERN.fullmatch(value):
        return None

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    if mm < 1 or mm > 12:
        return None

    year = 2000 + yy
    last_day = monthrange(year, mm)[1]

    if dd == 0:
        dd = last_day
    elif dd > last_day:
        return None

    return f"{year:04d}{mm:02d}{dd:02d}"


def format_expiry_display(yyyymmdd: str) -> str:
    """YYYYMMDD -> DD.MM.YYYY for display; other input is returned unchanged."""
    match = YYYYMMDD_PATTERN.fullmatch(yyyymmdd or "")
    if not match:
        return yyyymmdd
    year, month, day = match.groups()
    return f"{day}.{month}.{year}"
