"""Logging Config module.

This module provides logging configuration for the template renderers.
"""

from .formatters import CardNumberRedactingFormatter
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "CardNumberRedactingFormatter",
]
