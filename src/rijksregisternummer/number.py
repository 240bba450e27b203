"""Identification number value object."""

import re
from datetime import date

from rijksregisternummer import decoder, encoder
from rijksregisternummer.cleaner import DEFAULT_FORMATTING_CHARACTERS, clean
from rijksregisternummer.exceptions import InvalidRijksregisternummerError
from rijksregisternummer.models import Category, DecodedFields, Gender
from rijksregisternummer.validator import is_valid


class Rijksregisternummer:
    """Identification number of the National Register.

    Holds one clean and valid number in machine format. Instances are
    immutable, compare equal by machine format and are hashable.

    Example:
        >>> number = Rijksregisternummer("66.04.10-666.60")
        >>> number.birthday
        '1966-04-10'
        >>> str(number)
        '66.04.10-666.60'
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: str | None,
        formatting_characters: str | re.Pattern[str] = DEFAULT_FORMATTING_CHARACTERS,
    ):
        """Initialize from a raw number.

        Args:
            value: Raw number, formatted or not
            formatting_characters: Regular expression matching the characters
                to remove before validation

        Raises:
            InvalidRijksregisternummerError: If value is not a valid number
        """
        cleaned = clean(value, formatting_characters)
        if not is_valid(cleaned):
            raise InvalidRijksregisternummerError(value)

        object.__setattr__(self, "_value", cleaned)

    @classmethod
    def create(
        cls,
        birthday: str | date,
        sequence_number: int,
        category: Category | int = Category.RIJKSREGISTERNUMMER,
    ) -> "Rijksregisternummer":
        """Create a new number from its fields.

        Args:
            birthday: Birthday in ISO 8601 format or a date
            sequence_number: Sequence number (1..998)
            category: Category of the number

        Returns:
            The new number
        """
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_value", encoder.create(birthday, sequence_number, category))
        return instance

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self.human_format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rijksregisternummer):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def machine_format(self) -> str:
        """Return the number as digits only."""
        return self._value

    def human_format(self) -> str:
        """Return the number in yy.mm.dd-nnn.cc format."""
        return decoder.format(self._value)

    @property
    def birthday(self) -> str | None:
        """Birthday in ISO 8601 format, None if unknown."""
        return decoder.get_birthday(self._value)

    @property
    def birth_year(self) -> int | None:
        return decoder.get_birth_year(self._value)

    @property
    def birth_month(self) -> int | None:
        return decoder.get_birth_month(self._value)

    @property
    def birth_day_of_month(self) -> int | None:
        return decoder.get_birth_day_of_month(self._value)

    @property
    def gender(self) -> Gender:
        """'M', 'F' or '' when unknown."""
        return decoder.get_gender(self._value)

    @property
    def sequence_number(self) -> int:
        return decoder.get_sequence_number(self._value)

    @property
    def check_digits(self) -> int:
        return decoder.get_check_digits(self._value)

    @property
    def type(self) -> Category:
        return decoder.get_type(self._value)

    def is_bis(self) -> bool:
        """Return True if this number is a bisnummer."""
        return decoder.is_bis(self._value)

    def is_self_assigned(self) -> bool:
        """Return True if this number is self assigned."""
        return decoder.is_self_assigned(self._value)

    def is_rijksregisternummer(self) -> bool:
        """Return True if this number is a true national register number."""
        return decoder.is_rijksregisternummer(self._value)

    def is_known_birthday(self) -> bool:
        """Return True if the month field is not 00."""
        return decoder.is_known_birthday(self._value)

    def decode(self) -> DecodedFields:
        """Decode all fields at once."""
        return decoder.decode(self._value)
