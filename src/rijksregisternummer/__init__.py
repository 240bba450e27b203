"""
rijksregisternummer - Belgian National Register Number Library

Validates, parses, formats and creates identification numbers of the Belgian
National Register (rijksregisternummer), including bisnummers and self
assigned numbers.
"""

from rijksregisternummer.cleaner import DEFAULT_FORMATTING_CHARACTERS, NON_DIGITS, clean
from rijksregisternummer.decoder import (
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
from rijksregisternummer.encoder import compute_check_digits, create
from rijksregisternummer.exceptions import (
    FallenError,
    InvalidRijksregisternummerError,
    RijksregisternummerError,
)
from rijksregisternummer.models import BirthdayParts, Category, DecodedFields, Gender
from rijksregisternummer.number import Rijksregisternummer
from rijksregisternummer.validator import ValidationResult, is_valid, validate

__version__ = "1.0.0"

__all__ = [
    "BirthdayParts",
    "Category",
    "DEFAULT_FORMATTING_CHARACTERS",
    "DecodedFields",
    "FallenError",
    "Gender",
    "InvalidRijksregisternummerError",
    "NON_DIGITS",
    "Rijksregisternummer",
    "RijksregisternummerError",
    "ValidationResult",
    "clean",
    "compute_check_digits",
    "create",
    "decode",
    "extract_birthday_parts",
    "format",
    "get_birth_day_of_month",
    "get_birth_month",
    "get_birth_year",
    "get_birthday",
    "get_check_digits",
    "get_gender",
    "get_sequence_number",
    "get_type",
    "is_bis",
    "is_known_birthday",
    "is_rijksregisternummer",
    "is_self_assigned",
    "is_valid",
    "validate",
]
