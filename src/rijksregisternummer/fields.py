"""Fixed-width field decomposition of a machine format number.

Format (machine): YYMMDDNNNCC
Format (human):   YY.MM.DD-NNN.CC

Components:
    Y: Last two digits of the birth year (offset 0)
    M: Month, shifted by the category band (offset 2)
    D: Day of month (offset 4)
    N: Sequence number, odd for men and even for women (offset 6)
    C: Modulo-97 check digits (offset 9)
"""

import re
from dataclasses import dataclass

from rijksregisternummer.exceptions import FallenError

MACHINE_REGEX = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{3})([0-9]{2})")


@dataclass(frozen=True)
class Fields:
    """The five digit fields of a machine format number."""

    year: str
    month: str
    day: str
    sequence: str
    check: str

    @property
    def body(self) -> str:
        """The nine digits covered by the check digits."""
        return f"{self.year}{self.month}{self.day}{self.sequence}"


def is_machine_format(value: str | None) -> bool:
    """Return True if value consists of exactly 11 ASCII digits."""
    return isinstance(value, str) and MACHINE_REGEX.fullmatch(value) is not None


def split(value: str) -> Fields:
    """Split a machine format number into its fields.

    Args:
        value: Machine format number

    Returns:
        The digit fields

    Raises:
        FallenError: If value is not 11 digits
    """
    match = MACHINE_REGEX.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise FallenError("rijksregisternummer", value)

    return Fields(*match.groups())
