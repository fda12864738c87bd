"""Custom log formatters for the template renderers.

This module provides a formatter that masks credit card numbers in log output.
"""

import logging
import re

from template_renderers.render_utils.credit_card import validate_credit_card
from template_renderers.render_utils.masking import mask

# Runs of 13 to 19 digits, optionally grouped by single spaces or dashes
CARD_NUMBER_PATTERN = re.compile(r"(?<!\d)\d(?:[ -]?\d){12,18}(?!\d)")

VISIBLE_DIGITS = 4


class CardNumberRedactingFormatter(logging.Formatter):
    """Formatter that masks credit card numbers in log messages.

    A candidate digit run is masked only when it passes the Luhn check, so
    timestamps, millisecond counts and other long numbers are left alone.
    The last four digits stay visible.

    Attributes:
        redact_card_numbers: Whether to enable masking

    Example:
        >>> formatter = CardNumberRedactingFormatter(redact_card_numbers=True)
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_card_numbers: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_card_numbers = redact_card_numbers

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record, masking card numbers if enabled."""
        original = super().format(record)

        if self.redact_card_numbers:
            original = CARD_NUMBER_PATTERN.sub(self._redact, original)

        return original

    @staticmethod
    def _redact(match: re.Match[str]) -> str:
        digits = re.sub(r"[ -]", "", match.group(0))
        if not validate_credit_card(digits):
            return match.group(0)
        return mask(digits, "*", VISIBLE_DIGITS, False)
