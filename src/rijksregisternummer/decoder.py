"""Identification number decoder.

Every function except format() expects a number that passed validation and
raises FallenError when it meets one that could never have.
"""

from rijksregisternummer import bands, checksum, fields
from rijksregisternummer.exceptions import FallenError
from rijksregisternummer.models import BirthdayParts, Category, DecodedFields, Gender


def extract_birthday_parts(value: str) -> BirthdayParts:
    """Extract birth year, adjusted month and day.

    The century is derived from the check digits, the month is shifted back
    out of its category band. Month 0 means the birthday is unknown.

    Args:
        value: Clean and valid number

    Returns:
        Birthday parts
    """
    parts = fields.split(value)

    born_1900s = checksum.born_before_2000(int(parts.body), int(parts.check))
    if born_1900s is None:
        raise FallenError("check digits", parts.check)

    return BirthdayParts(
        year=checksum.century(born_1900s) + int(parts.year),
        month=bands.readjust_month(int(parts.month)),
        day=int(parts.day),
    )


def get_birthday(value: str) -> str | None:
    """Return the birthday in ISO 8601 format, or None if it is unknown."""
    year, month, day = extract_birthday_parts(value)
    if month == 0:
        return None

    return f"{year:04d}-{month:02d}-{day:02d}"


def get_birth_year(value: str) -> int | None:
    """Return the birth year, or None if the whole birthday is unknown.

    Numbers of people without any known birthday are issued as 00.00.00 (or
    a band equivalent), which decodes to 1900 or 2000 with month 0.
    """
    year, month, _ = extract_birthday_parts(value)
    if month == 0 and year in (1900, 2000):
        return None

    return year


def get_birth_month(value: str) -> int | None:
    """Return the birth month (1..12), or None if it is unknown."""
    _, month, _ = extract_birthday_parts(value)
    return month or None


def get_birth_day_of_month(value: str) -> int | None:
    """Return the day of the month of birth, or None if the month is unknown."""
    _, month, day = extract_birthday_parts(value)
    if month == 0:
        return None

    return day


def is_known_birthday(value: str) -> bool:
    """Return True unless the month field is literally 00."""
    return fields.split(value).month != "00"


def get_gender(value: str) -> Gender:
    """Return the gender.

    Bisnummers of the unknown gender band have no gender. Otherwise odd
    sequence numbers are male and even sequence numbers are female.
    """
    if get_type(value) is Category.BISNUMMER_UNKNOWN_GENDER:
        return Gender.UNKNOWN

    return Gender.FEMALE if get_sequence_number(value) % 2 == 0 else Gender.MALE


def get_sequence_number(value: str) -> int:
    """Return the sequence number."""
    return int(fields.split(value).sequence)


def get_check_digits(value: str) -> int:
    """Return the check digits."""
    return int(fields.split(value).check)


def get_type(value: str) -> Category:
    """Return the category of the number."""
    return bands.get_category(int(fields.split(value).month))


def is_bis(value: str) -> bool:
    """Return True if the number is a bisnummer (either gender band)."""
    return get_type(value) in (
        Category.BISNUMMER_UNKNOWN_GENDER,
        Category.BISNUMMER_KNOWN_GENDER,
    )


def is_self_assigned(value: str) -> bool:
    """Return True if the number is self assigned."""
    return get_type(value) is Category.SELF_ASSIGNED


def is_rijksregisternummer(value: str) -> bool:
    """Return True if the number is a true national register number."""
    return get_type(value) is Category.RIJKSREGISTERNUMMER


def format(value: str | None) -> str | None:
    """Format a number as yy.mm.dd-nnn.cc.

    Anything that is not 11 digits (None included) is returned unchanged.
    Check digits and birthday are not validated.

    Example:
        >>> format("93051822361")
        '93.05.18-223.61'
    """
    if not fields.is_machine_format(value):
        return value

    parts = fields.split(value)
    return f"{parts.year}.{parts.month}.{parts.day}-{parts.sequence}.{parts.check}"


def decode(value: str) -> DecodedFields:
    """Decode all fields of a clean and valid number.

    Args:
        value: Clean and valid number

    Returns:
        Decoded fields
    """
    return DecodedFields(
        machine_format=value,
        human_format=format(value),
        category=get_type(value),
        birthday=get_birthday(value),
        birth_year=get_birth_year(value),
        birth_month=get_birth_month(value),
        birth_day_of_month=get_birth_day_of_month(value),
        known_birthday=is_known_birthday(value),
        gender=get_gender(value),
        sequence_number=get_sequence_number(value),
        check_digits=get_check_digits(value),
    )
