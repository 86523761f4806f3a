"""
Tests for JSON output and the command line interface.
"""

import json

import pytest
from pharma_gs1 import format_fields, validate_to_dict, validate_to_json, ValidatorOptions
from pharma_gs1.__main__ import main


SAMPLE = "(01)08699550011111(21)0000000000010158(10)173350(17)271229"


class TestFormatFields:

    def test_human_readable_names(self):
        output = format_fields({
            "01": "08699550011111",
            "17": "271229",
            "10": "173350",
            "21": "0000000000010158",
        })

        assert output == {
            "GTIN Code": "08699550011111",
            "Expiry Date": "29.12.2027",
            "Batch/Lot Number": "173350",
            "Serial Number": "0000000000010158",
        }

    def test_invalid_expiry_left_raw(self):
        assert format_fields({"17": "271329"}) == {"Expiry Date": "271329"}

    def test_day_zero_expiry(self):
        assert format_fields({"17": "270200"}) == {"Expiry Date": "28.02.2027"}


class TestJsonOutput:

    def test_success_json(self):
        data = json.loads(validate_to_json(SAMPLE))

        assert data == {
            "status": True,
            "gtin": "08699550011111",
            "exp": "20271229",
            "lot": "173350",
            "serial": "0000000000010158",
        }

    def test_failure_json_keeps_unicode(self):
        output = validate_to_json("(01)08699550011111(17)271329(10)L1(21)S1")

        assert "hatalı" in output
        assert json.loads(output) == {
            "status": False,
            "message": "Son kullanma tarihi (17) hatalı",
        }

    def test_dict_with_options(self):
        data = validate_to_dict(SAMPLE, ValidatorOptions(strict_gtin_checksum=True, language="en"))
        assert data == {"status": False, "message": "GTIN (01) invalid"}


class TestCli:

    def test_json_success(self, capsys):
        exit_code = main([SAMPLE, "--json"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data["status"] is True
        assert data["exp"] == "20271229"

    def test_json_with_fields(self, capsys):
        main([SAMPLE, "--json", "--fields"])
        data = json.loads(capsys.readouterr().out)

        assert data["fields"]["Expiry Date"] == "29.12.2027"

    def test_failure_exit_code(self, capsys):
        exit_code = main(["(01)08699550011111(17)271229", "--json", "--lang", "en"])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 1
        assert data == {"status": False, "message": "Lot (10) missing, Serial (21) missing"}

    def test_strict_gtin_flag(self, capsys):
        assert main([SAMPLE, "--strict-gtin", "--json"]) == 1
        assert "GTIN (01)" in capsys.readouterr().out

    def test_text_report(self, capsys):
        exit_code = main([SAMPLE, "--fields"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Pharma Scan Result" in out
        assert "Format: parenthesized" in out
        assert "Status: OK" in out
        assert "Serial Number: '0000000000010158'" in out

    def test_text_report_failure(self, capsys):
        assert main(["garbage", "--fields"]) == 1
        out = capsys.readouterr().out

        assert "Status: FAILED" in out
        assert "  - Lot (10) eksik" in out
        assert "Unparsed trailing data: 'garbage'" in out

    def test_bad_language_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main([SAMPLE, "--lang", "de"])
        assert exc.value.code == 2
