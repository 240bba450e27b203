"""Month bands.

The two-digit month field encodes both the birth month and the category of
a number by adding a fixed offset to the month:

    Raw month  Category                  Offset
    00-12      RIJKSREGISTERNUMMER        0
    20-32      BISNUMMER_UNKNOWN_GENDER  20
    40-52      BISNUMMER_KNOWN_GENDER    40
    60-72      SELF_ASSIGNED             60

An adjusted month of 0 means the birth month is unknown.
"""

from rijksregisternummer.exceptions import FallenError
from rijksregisternummer.models import Category

MONTH_OFFSETS: dict[Category, int] = {
    Category.RIJKSREGISTERNUMMER: 0,
    Category.BISNUMMER_UNKNOWN_GENDER: 20,
    Category.BISNUMMER_KNOWN_GENDER: 40,
    Category.SELF_ASSIGNED: 60,
}


def to_category(category: Category | int) -> Category:
    """Coerce an int to a Category.

    Raises:
        FallenError: If category is not one of the known categories
    """
    try:
        return Category(category)
    except ValueError:
        raise FallenError("category", category) from None


def in_band(raw_month: int) -> bool:
    """Return True if a raw month field falls in one of the bands."""
    return any(offset <= raw_month <= offset + 12 for offset in MONTH_OFFSETS.values())


def get_category(raw_month: int) -> Category:
    """Classify a raw month field into its category.

    Args:
        raw_month: Month field as stored in the number

    Returns:
        The category of the band the month falls in

    Raises:
        FallenError: If raw_month is outside all bands
    """
    for category, offset in MONTH_OFFSETS.items():
        if offset <= raw_month <= offset + 12:
            return category

    raise FallenError("month", raw_month)


def adjust_month(month: int, category: Category | int) -> int:
    """Shift a calendar month (0 for unknown) into the band of a category."""
    return month + MONTH_OFFSETS[to_category(category)]


def readjust_month(raw_month: int) -> int:
    """Shift a raw month field back to the calendar month (0 for unknown)."""
    return raw_month - MONTH_OFFSETS[get_category(raw_month)]
