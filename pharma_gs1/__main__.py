"""
CLI interface for the pharma scan validator.

Usage:
    python -m pharma_gs1 "<barcode text>" [options]

Options:
    --json              Output the validation result as JSON
    --fields            Include the decoded fields in the output
    --strict-gtin       Enforce the GTIN check digit
    --strict-lengths    Enforce lot/serial maximum length
    --lang {tr,en}      Message language
    --verbose           Log decoder decisions to stderr
"""

import argparse
import json
import logging
import sys
from typing import Optional

from .core.parser import DecodeResult, decode
from .formatters.json_formatter import format_fields
from .pharma_validator import MESSAGES, PharmaScanResult, ValidatorOptions, pharma_validator


def format_result(decoded: DecodeResult, result: PharmaScanResult, show_fields: bool = False) -> str:
    """Format a validation result for display."""
    lines = [
        "=" * 60,
        "Pharma Scan Result",
        "=" * 60,
        f"Raw Input: {decoded.raw!r}",
        f"Format: {decoded.format.value}",
    ]

    if decoded.symbology_identifier:
        lines.append(f"Symbology: {decoded.symbology_identifier}")

    lines.append(f"GS Separators Found: {decoded.gs_seen}")

    if show_fields:
        lines.extend(["", "Fields:", "-" * 40])
        for name, value in format_fields(decoded.fields).items():
            lines.append(f"  {name}: {value!r}")
        if decoded.trailing:
            lines.append(f"  Unparsed trailing data: {decoded.trailing!r}")
        if decoded.skipped_ais:
            lines.append(f"  Skipped AIs: {', '.join(decoded.skipped_ais)}")

    lines.append("")
    if result.status:
        lines.extend([
            "Status: OK",
            f"  GTIN: {result.gtin}",
            f"  Expiry: {result.exp}",
            f"  Lot: {result.lot}",
            f"  Serial: {result.serial}",
        ])
    else:
        lines.append("Status: FAILED")
        for reason in result.message.split(", "):
            lines.append(f"  - {reason}")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='pharma_gs1',
        description='Decode and validate pharmaceutical GS1 scans'
    )

    parser.add_argument(
        'barcode',
        help='Scanned barcode data'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--fields',
        action='store_true',
        help='Include decoded fields in the output'
    )

    parser.add_argument(
        '--strict-gtin',
        action='store_true',
        help='Reject GTINs with an invalid check digit'
    )

    parser.add_argument(
        '--strict-lengths',
        action='store_true',
        help='Reject lot/serial values longer than 20 characters'
    )

    parser.add_argument(
        '--lang',
        choices=sorted(MESSAGES),
        default='tr',
        help='Language of failure messages'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log decoder decisions to stderr'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = ValidatorOptions(
        strict_gtin_checksum=args.strict_gtin,
        strict_lengths=args.strict_lengths,
        language=args.lang,
    )

    try:
        decoded = decode(args.barcode)
        result = pharma_validator(args.barcode, options)
    except Exception as e:
        error_output = {
            "error": str(e),
            "input": args.barcode
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        return 1

    if args.json:
        output = result.to_dict()
        if args.fields:
            output["fields"] = format_fields(decoded.fields)
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(decoded, result, show_fields=args.fields))

    return 0 if result.status else 1


if __name__ == '__main__':
    sys.exit(main())
