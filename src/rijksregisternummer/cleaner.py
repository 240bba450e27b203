"""Removal of formatting characters."""

import re

DEFAULT_FORMATTING_CHARACTERS = r"[.\- ]"
NON_DIGITS = r"\D"


def clean(
    value: str | None,
    formatting_characters: str | re.Pattern[str] = DEFAULT_FORMATTING_CHARACTERS,
) -> str:
    """Remove formatting characters from an identification number.

    Args:
        value: The unclean number, None is treated as an empty string
        formatting_characters: Regular expression matching the characters to
            remove. Use NON_DIGITS to remove everything except digits.

    Returns:
        The cleaned number, possibly empty

    Example:
        >>> clean("66.04.10-666.60")
        '66041066660'
    """
    if value is None:
        return ""

    return re.sub(formatting_characters, "", value)
