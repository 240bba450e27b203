"""Identification number validator."""

import logging
from dataclasses import dataclass
from datetime import date

from rijksregisternummer import bands, checksum, fields

logger = logging.getLogger(__name__)

MIN_SEQUENCE_NUMBER = 1
MAX_SEQUENCE_NUMBER = 998


@dataclass
class ValidationResult:
    """Validation result."""

    valid: bool
    error: str | None = None


def validate(value: str | None) -> ValidationResult:
    """Validate a cleaned identification number.

    The number must be 11 digits, its check digits must match a birth in
    either the 1900s or the 2000s, its birthday must be a real date (or have
    an unknown month) and its sequence number must be in [1, 998].

    Args:
        value: Cleaned number, any value is accepted

    Returns:
        Validation result naming the first rule that failed
    """
    result = _validate(value)
    if not result.valid:
        logger.debug("Rejected %r: %s", value, result.error)

    return result


def _validate(value: str | None) -> ValidationResult:
    if not fields.is_machine_format(value):
        return ValidationResult(valid=False, error="must consist of exactly 11 digits")

    parts = fields.split(value)

    born_1900s = checksum.born_before_2000(int(parts.body), int(parts.check))
    if born_1900s is None:
        return ValidationResult(valid=False, error=f"invalid check digits {parts.check}")

    raw_month = int(parts.month)
    if not bands.in_band(raw_month):
        return ValidationResult(valid=False, error=f"invalid month field {parts.month}")

    year = checksum.century(born_1900s) + int(parts.year)
    month = bands.readjust_month(raw_month)
    day = int(parts.day)

    if month == 0:
        # Birthday (partially) unknown, only the day range is checked.
        if day > 31:
            return ValidationResult(valid=False, error=f"invalid day field {parts.day}")
    else:
        try:
            date(year, month, day)
        except ValueError:
            return ValidationResult(
                valid=False,
                error=f"invalid birthday {year:04d}-{month:02d}-{day:02d}",
            )

    sequence_number = int(parts.sequence)
    if not MIN_SEQUENCE_NUMBER <= sequence_number <= MAX_SEQUENCE_NUMBER:
        return ValidationResult(
            valid=False, error=f"sequence number {parts.sequence} out of range"
        )

    return ValidationResult(valid=True)


def is_valid(value: str | None) -> bool:
    """Return True if value is a valid cleaned identification number."""
    return validate(value).valid
