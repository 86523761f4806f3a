"""
Tests for the GTIN check digit and expiry date validators.
"""

import pytest
from pharma_gs1.validators import validate_gtin, parse_expiry, format_expiry_display


VALID_GTIN14 = "08699550011152"


class TestGtinCheckDigit:
    """Tests for GTIN check digit validation."""

    def test_valid_gtin14(self):
        assert validate_gtin(VALID_GTIN14)

    def test_wrong_check_digit(self):
        assert not validate_gtin("08699550011151")

    @pytest.mark.parametrize("position", range(13))
    def test_single_digit_change_fails(self, position):
        """Changing any non-check digit invalidates the GTIN."""
        digits = list(VALID_GTIN14)
        digits[position] = str((int(digits[position]) + 1) % 10)
        assert not validate_gtin("".join(digits))

    def test_gtin13_is_zero_padded(self):
        assert validate_gtin(VALID_GTIN14[1:])
        assert not validate_gtin("8699550011151")

    def test_sample_gtin_fails_checksum(self):
        """The transcription sample carries a GTIN that fails Mod10."""
        assert not validate_gtin("08699550011111")

    @pytest.mark.parametrize("value", [
        None,
        "",
        "123",
        "086995500111520",
        "0869955001115A",
        " 8699550011152",
        "0869955001111\n",
        "08699550011152\n",
        "\uff10\uff18\uff16\uff19\uff19\uff15\uff15\uff10\uff10\uff11\uff11\uff15\uff12",
    ])
    def test_malformed_input(self, value):
        assert validate_gtin(value) is False


class TestExpiry:
    """Tests for AI(17) YYMMDD expiry parsing."""

    def test_valid_date(self):
        assert parse_expiry("271229") == "20271229"

    def test_day_past_end_of_month(self):
        """29 Feb 2027 does not exist."""
        assert parse_expiry("270229") is None

    def test_leap_year(self):
        assert parse_expiry("240229") == "20240229"

    def test_day_zero_means_end_of_month(self):
        assert parse_expiry("270200") == "20270228"
        assert parse_expiry("240200") == "20240229"
        assert parse_expiry("271200") == "20271231"

    @pytest.mark.parametrize("value", ["271329", "271300", "270029", "270000"])
    def test_invalid_month(self, value):
        assert parse_expiry(value) is None

    def test_day_31_in_30_day_month(self):
        assert parse_expiry("270431") is None
        assert parse_expiry("270430") == "20270430"

    @pytest.mark.parametrize("value", [
        None,
        "",
        "27122",
        "2712290",
        "2712a9",
        "27-12-",
        "271229\n",
        "\uff12\uff17\uff11\uff12\uff12\uff19",
    ])
    def test_malformed_input(self, value):
        """Only six ASCII digits are a date; no trailing newline, no full-width digits."""
        assert parse_expiry(value) is None


class TestExpiryDisplay:

    def test_format(self):
        assert format_expiry_display("20271229") == "29.12.2027"

    def test_passthrough(self):
        assert format_expiry_display("271229") == "271229"
