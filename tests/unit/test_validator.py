"""Tests for the validator."""

import logging

from rijksregisternummer import ValidationResult, is_valid, validate
from rijksregisternummer.checksum import MILLENNIUM_PREFIX, check_for


class TestIsValid:
    """Tests for is_valid()."""

    def test_valid_numbers(self) -> None:
        """Test numbers of every category."""
        for value in [
            "66041066660",
            "66041099720",
            "93051822361",
            "66241066606",
            "66241099763",
            "66441066649",
            "66441099709",
            "66641066692",
            "66641099752",
        ]:
            assert is_valid(value) is True, value

    def test_invalid_check_digits(self) -> None:
        """Test a number with wrong check digits."""
        assert is_valid("66041066600") is False

    def test_sequence_number_zero(self) -> None:
        """Test that sequence number 000 is rejected despite correct check digits."""
        assert is_valid("66041000047") is False
        assert is_valid("66041000060") is False

    def test_sequence_number_999(self) -> None:
        """Test that sequence number 999 is rejected despite correct check digits."""
        assert is_valid("66041099918") is False
        assert is_valid("66041099960") is False

    def test_invalid_birthday(self) -> None:
        """Test 30 February with correct check digits."""
        assert is_valid("66023000114") is False

    def test_born_in_2000s(self) -> None:
        """Test numbers whose check digits assume a birth after 1999."""
        assert is_valid("00010100105") is True
        assert is_valid("00022900145") is True

    def test_leap_year_depends_on_century(self) -> None:
        """Test that 29 February 1900 is rejected while 2000 is accepted."""
        assert is_valid("00022900116") is False

    def test_unknown_birthday(self) -> None:
        """Test numbers with month 00."""
        assert is_valid("40000095381") is True
        assert is_valid("66001566676") is True
        assert is_valid("00000000196") is True
        assert is_valid("00000000128") is True

    def test_unknown_month_in_bis_band(self) -> None:
        """Test a bisnummer with raw month 20."""
        assert is_valid("66201066675") is True

    def test_unknown_month_day_out_of_range(self) -> None:
        """Test month 00 with day 32."""
        assert is_valid("66003266651") is False

    def test_month_between_bands(self) -> None:
        """Test month 13 with correct check digits."""
        assert is_valid("66131066626") is False

    def test_malformed(self) -> None:
        """Test values that are not 11 digits."""
        for value in [
            None,
            "",
            "Rare jongens, die Romeinen",
            "6604106666",
            "660410666600",
            "66.04.10-666.60",
            "66041066660\n",
            "６６０４１０６６６６０",
        ]:
            assert is_valid(value) is False, repr(value)

    def test_check_digits_match_a_candidate(self) -> None:
        """Test that valid check digits equal one of the two candidates."""
        for value in ["66041066660", "00010100105", "40000095381", "66641099752"]:
            body = int(value[:9])
            check = int(value[9:])
            assert check in (check_for(body), check_for(MILLENNIUM_PREFIX + body))


class TestValidate:
    """Tests for validate()."""

    def test_valid(self) -> None:
        """Test result of a valid number."""
        assert validate("66041066660") == ValidationResult(valid=True)

    def test_errors_name_the_failed_rule(self) -> None:
        """Test the error message of each rule."""
        assert "11 digits" in validate("abc").error
        assert "check digits" in validate("66041066600").error
        assert "month" in validate("66131066626").error
        assert "birthday" in validate("66023000114").error
        assert "day" in validate("66003266651").error
        assert "sequence number" in validate("66041000047").error

    def test_rejection_logged(self, caplog) -> None:
        """Test that rejected numbers are logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="rijksregisternummer.validator")

        validate("66041066600")

        assert any("66041066600" in record.getMessage() for record in caplog.records)
