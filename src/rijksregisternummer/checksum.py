"""Modulo-97 check digits.

The check digits are 97 minus the remainder of the nine leading digits
divided by 97. For people born in 2000 or later a 2 is prefixed to those
nine digits first, so the check digits also tell the century of birth.
"""

MODULUS = 97
MILLENNIUM_PREFIX = 2_000_000_000


def check_for(number: int) -> int:
    """Return the check digits for a number."""
    return MODULUS - number % MODULUS


def born_before_2000(body: int, check: int) -> bool | None:
    """Determine the century of birth from the check digits.

    Args:
        body: The nine leading digits as an integer
        check: The check digits

    Returns:
        True if the check digits match a birth in the 1900s, False if they
        match a birth in the 2000s, None if they match neither
    """
    if check_for(body) == check:
        return True

    if check_for(MILLENNIUM_PREFIX + body) == check:
        return False

    return None


def century(born_1900s: bool) -> int:
    """Return the century base year for a century flag."""
    return 1900 if born_1900s else 2000
