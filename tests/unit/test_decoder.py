"""Tests for the decoder functions."""

import pytest
from rijksregisternummer import (
    BirthdayParts,
    Category,
    FallenError,
    Gender,
    decode,
    extract_birthday_parts,
    format,
    get_birth_day_of_month,
    get_birth_month,
    get_birth_year,
    get_birthday,
    get_check_digits,
    get_gender,
    get_sequence_number,
    get_type,
    is_bis,
    is_known_birthday,
    is_rijksregisternummer,
    is_self_assigned,
)


class TestBirthday:
    """Tests for the birthday accessors."""

    def test_known_birthday(self) -> None:
        """Test a standard number."""
        assert get_birthday("66041066660") == "1966-04-10"
        assert get_birth_year("66041066660") == 1966
        assert get_birth_month("66041066660") == 4
        assert get_birth_day_of_month("66041066660") == 10
        assert is_known_birthday("66041066660") is True

    def test_birthday_in_bands(self) -> None:
        """Test that the category band is removed from the month."""
        for value in ["66241066606", "66441066649", "66641066692"]:
            assert get_birthday(value) == "1966-04-10"

    def test_birthday_born_in_2000s(self) -> None:
        """Test that the century follows from the check digits."""
        assert get_birthday("00010100105") == "2000-01-01"
        assert get_birthday("00022900145") == "2000-02-29"

    def test_extract_birthday_parts(self) -> None:
        """Test the raw birthday triple."""
        assert extract_birthday_parts("93051822361") == BirthdayParts(1993, 5, 18)
        assert extract_birthday_parts("40000095381") == BirthdayParts(1940, 0, 0)

    def test_unknown_birthday(self) -> None:
        """Test month 00: year known, month and day unknown."""
        assert get_birthday("40000095381") is None
        assert get_birth_year("40000095381") == 1940
        assert get_birth_month("40000095381") is None
        assert get_birth_day_of_month("40000095381") is None
        assert is_known_birthday("40000095381") is False

    def test_unknown_month_with_day(self) -> None:
        """Test month 00 with a day: the day is still not reported."""
        assert get_birthday("66001566676") is None
        assert get_birth_year("66001566676") == 1966
        assert get_birth_day_of_month("66001566676") is None

    def test_unknown_birth_year(self) -> None:
        """Test the all zero birthday in both centuries."""
        assert get_birth_year("00000000196") is None
        assert get_birth_year("00000000128") is None

    def test_unknown_month_in_bis_band(self) -> None:
        """Test raw month 20: unknown month but not a literal 00."""
        assert get_birthday("66201066675") is None
        assert get_birth_year("66201066675") == 1966
        assert is_known_birthday("66201066675") is True

    def test_invalid_check_digits(self) -> None:
        """Test that decoding an unvalidated number is an internal error."""
        with pytest.raises(FallenError):
            get_birthday("66041066600")


class TestGender:
    """Tests for get_gender()."""

    def test_gender(self) -> None:
        """Test gender of every category."""
        assert get_gender("66041066660") == "F"
        assert get_gender("66041099720") == "M"
        assert get_gender("66241066606") == ""
        assert get_gender("66241099763") == ""
        assert get_gender("66441066649") == "F"
        assert get_gender("66441099709") == "M"
        assert get_gender("66641066692") == "F"
        assert get_gender("66641099752") == "M"

    def test_gender_enum(self) -> None:
        """Test that the result is a Gender member."""
        assert get_gender("66041066660") is Gender.FEMALE
        assert get_gender("93051822361") is Gender.MALE
        assert get_gender("66201066675") is Gender.UNKNOWN

    def test_gender_follows_sequence_parity(self) -> None:
        """Test that gender outside the unknown band is the sequence parity."""
        for value in ["66041066660", "93051822361", "40000095381", "66441099709"]:
            expected = "F" if get_sequence_number(value) % 2 == 0 else "M"
            assert get_gender(value) == expected


class TestFields:
    """Tests for sequence number, check digits and type."""

    def test_sequence_number(self) -> None:
        """Test sequence number extraction."""
        assert get_sequence_number("66041066660") == 666
        assert get_sequence_number("00010100105") == 1

    def test_check_digits(self) -> None:
        """Test check digit extraction."""
        assert get_check_digits("66041066660") == 60
        assert get_check_digits("00010100105") == 5

    def test_type(self) -> None:
        """Test category of every band."""
        assert get_type("66041066660") is Category.RIJKSREGISTERNUMMER
        assert get_type("66241066606") is Category.BISNUMMER_UNKNOWN_GENDER
        assert get_type("66441066649") is Category.BISNUMMER_KNOWN_GENDER
        assert get_type("66641066692") is Category.SELF_ASSIGNED

    def test_predicates(self) -> None:
        """Test that exactly one predicate matches each category."""
        cases = {
            "66041066660": (False, False, True),
            "66241066606": (True, False, False),
            "66441066649": (True, False, False),
            "66641066692": (False, True, False),
        }
        for value, expected in cases.items():
            assert (is_bis(value), is_self_assigned(value), is_rijksregisternummer(value)) == expected

    def test_type_outside_bands(self) -> None:
        """Test that a month outside all bands is an internal error."""
        with pytest.raises(FallenError):
            get_type("66131066626")

    def test_malformed_input(self) -> None:
        """Test that decoding a malformed value is an internal error."""
        with pytest.raises(FallenError):
            get_sequence_number("Rare jongens, die Romeinen")


class TestFormat:
    """Tests for format()."""

    def test_format_none(self) -> None:
        """Test that None passes through."""
        assert format(None) is None

    def test_format_empty_string(self) -> None:
        """Test that an empty string passes through."""
        assert format("") == ""

    def test_format_clean_number(self) -> None:
        """Test formatting a clean number."""
        assert format("93051822361") == "93.05.18-223.61"

    def test_format_does_not_validate(self) -> None:
        """Test that check digits are not verified."""
        assert format("66041066600") == "66.04.10-666.00"

    def test_format_wrong_shape(self) -> None:
        """Test that anything not 11 digits passes through."""
        assert format("Rare jongens, die Romeinen") == "Rare jongens, die Romeinen"
        assert format("6604106666") == "6604106666"
        assert format("66.04.10-666.60") == "66.04.10-666.60"


class TestDecode:
    """Tests for decode()."""

    def test_decode(self) -> None:
        """Test decoding all fields at once."""
        decoded = decode("66441099709")

        assert decoded.machine_format == "66441099709"
        assert decoded.human_format == "66.44.10-997.09"
        assert decoded.category is Category.BISNUMMER_KNOWN_GENDER
        assert decoded.birthday == "1966-04-10"
        assert decoded.birth_year == 1966
        assert decoded.birth_month == 4
        assert decoded.birth_day_of_month == 10
        assert decoded.known_birthday is True
        assert decoded.gender is Gender.MALE
        assert decoded.sequence_number == 997
        assert decoded.check_digits == 9

    def test_to_dict(self) -> None:
        """Test JSON friendly conversion."""
        data = decode("40000095381").to_dict()

        assert data["category"] == "rijksregisternummer"
        assert data["gender"] == "M"
        assert data["birthday"] is None
        assert data["birth_year"] == 1940
        assert data["known_birthday"] is False
