"""Identification number encoder."""

import re
from datetime import date

from rijksregisternummer import bands, checksum
from rijksregisternummer.models import Category

# Adding this to the yymmdd number equals prefixing a 2 to the nine leading
# digits once the sequence number is appended.
MILLENNIUM_OFFSET = checksum.MILLENNIUM_PREFIX // 1000

BIRTHDAY_REGEX = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
MIN_YEAR = 1900
MAX_YEAR = 2099


def _split_birthday(birthday: str | date) -> tuple[int, int, int]:
    # Not parsed as a date so unknown parts (e.g. "1940-00-00") can be encoded.
    if isinstance(birthday, date):
        birthday = birthday.isoformat()

    match = BIRTHDAY_REGEX.fullmatch(birthday) if isinstance(birthday, str) else None
    if not match:
        raise ValueError(f"Invalid birthday: {birthday!r}")

    year, month, day = (int(part) for part in match.groups())
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Birth year {year} outside {MIN_YEAR}-{MAX_YEAR}")

    return year, month, day


def compute_check_digits(
    birthday: str | date,
    sequence_number: int,
    category: Category | int = Category.RIJKSREGISTERNUMMER,
) -> str:
    """Compute the check digits of a number.

    Args:
        birthday: Birthday in ISO 8601 format (YYYY-MM-DD) or a date. Use
            00 for unknown month and day.
        sequence_number: Sequence number (1..998)
        category: Category of the number

    Returns:
        Two-digit check digits

    Raises:
        ValueError: If birthday is not YYYY-MM-DD or the year is outside 1900-2099
        FallenError: If category is unknown

    Example:
        >>> compute_check_digits("1966-04-10", 666)
        '60'
    """
    year, month, day = _split_birthday(birthday)
    month = bands.adjust_month(month, category)

    number = ((year % 100) * 100 + month) * 100 + day
    if year >= 2000:
        number += MILLENNIUM_OFFSET

    number = number * 1000 + sequence_number

    return f"{checksum.check_for(number):02d}"


def create(
    birthday: str | date,
    sequence_number: int,
    category: Category | int = Category.RIJKSREGISTERNUMMER,
) -> str:
    """Create a number in machine format.

    The caller supplies a sequence number in [1, 998]; the result is not
    validated again.

    Args:
        birthday: Birthday in ISO 8601 format (YYYY-MM-DD) or a date
        sequence_number: Sequence number (1..998)
        category: Category of the number

    Returns:
        The 11-digit number

    Raises:
        ValueError: If birthday is not YYYY-MM-DD or the year is outside 1900-2099
        FallenError: If category is unknown

    Example:
        >>> create("1966-04-10", 666, Category.SELF_ASSIGNED)
        '66641066692'
    """
    year, month, day = _split_birthday(birthday)
    month = bands.adjust_month(month, category)
    check = compute_check_digits(birthday, sequence_number, category)

    return f"{year % 100:02d}{month:02d}{day:02d}{sequence_number:03d}{check}"
