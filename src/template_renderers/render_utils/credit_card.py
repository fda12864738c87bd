"""Credit card number validation (Luhn) and last-four-digit extraction."""

import re
from typing import Optional

MIN_CARD_LENGTH = 8
MAX_CARD_LENGTH = 19

_NON_DIGITS = re.compile(r"[^0-9]")


def validate_credit_card(cc: Optional[str]) -> bool:
    """Validate a credit card number using the Luhn algorithm.

    The length check applies to the raw string, separators included, while
    the checksum only considers ASCII digits. Callers wanting a digits-only
    length check should strip separators first, as ``format_credit_card`` does.

    Args:
        cc: Credit card number.

    Returns:
        True if the number has 8 to 19 characters and satisfies the Luhn checksum.

    Example:
        >>> validate_credit_card("4505 4672 3366 6430")
        True
        >>> validate_credit_card("0123456789012345")
        False
    """
    if cc is None:
        return False

    if not MIN_CARD_LENGTH <= len(cc) <= MAX_CARD_LENGTH:
        return False

    total = 0
    double = False
    for char in reversed(cc):
        if not "0" <= char <= "9":
            continue
        digit = ord(char) - ord("0")
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double

    return total % 10 == 0


def format_credit_card(src: Optional[str]) -> Optional[str]:
    """Return the last four digits of a valid credit card number.

    Non-digits are stripped before validation.

    Returns:
        The last four digits, an empty string if the number is invalid, or the
        input unchanged when it is None or blank.

    Example:
        >>> format_credit_card("4342 2565 6244 0179")
        '0179'
    """
    if src is None or not src.strip():
        return src

    digits = _NON_DIGITS.sub("", src)
    if validate_credit_card(digits):
        return digits[-4:]
    return ""
