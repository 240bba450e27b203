"""Data models shared by the codec modules."""

from dataclasses import asdict, dataclass
from enum import Enum, IntEnum
from typing import Any, NamedTuple


class Category(IntEnum):
    """Category of an identification number, encoded in the month band."""

    RIJKSREGISTERNUMMER = 1
    BISNUMMER_UNKNOWN_GENDER = 2
    BISNUMMER_KNOWN_GENDER = 4
    SELF_ASSIGNED = 5


class Gender(str, Enum):
    """Gender derived from an identification number."""

    MALE = "M"
    FEMALE = "F"
    UNKNOWN = ""

    def __str__(self) -> str:
        return self.value


class BirthdayParts(NamedTuple):
    """Birth year, adjusted month and day as stored in a number.

    Month 0 means the birthday is (partially) unknown.
    """

    year: int
    month: int
    day: int


@dataclass(frozen=True)
class DecodedFields:
    """All fields decoded from one identification number."""

    machine_format: str
    human_format: str
    category: Category
    birthday: str | None
    birth_year: int | None
    birth_month: int | None
    birth_day_of_month: int | None
    known_birthday: bool
    gender: Gender
    sequence_number: int
    check_digits: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON serialisable dict."""
        data = asdict(self)
        data["category"] = self.category.name.lower()
        data["gender"] = self.gender.value
        return data
