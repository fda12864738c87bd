"""Parser for per-invocation ``key=value`` configuration blocks.

Templates supply renderer configuration as a small properties block, e.g.::

    mark=...
    max=12

The syntax follows the ``.properties`` line format: ``#`` and ``!`` start
comments, keys are separated from values by ``=``, ``:`` or whitespace,
backslash escapes are honoured and a line ending in an odd number of
backslashes continues on the next line.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

KEY_VALUE_SEPARATORS = "=:"
WHITESPACE = " \t\f"
COMMENT_MARKERS = "#!"

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def parse_properties_string(src: Optional[str]) -> dict[str, str]:
    """Parse a properties block into a string-keyed lookup.

    Parsing never raises: blank input yields an empty dict and a malformed
    ``\\uXXXX`` escape discards the whole block.

    Args:
        src: Properties text, may be None.

    Returns:
        Ordered mapping of key to value. Duplicate keys keep the last value.

    Example:
        >>> parse_properties_string("mask=#\\nunmasked=4")
        {'mask': '#', 'unmasked': '4'}
    """
    properties: dict[str, str] = {}
    if src is None or not src.strip():
        return properties

    try:
        for line in _logical_lines(src):
            key, value = _split_key_value(line)
            properties[_unescape(key)] = _unescape(value)
    except ValueError as e:
        logger.debug(f"Ignoring malformed properties block: {e}")
        return {}

    return properties


def get_int_property(properties: dict[str, str], key: str, default: int) -> int:
    """Return an integer property, or the default when missing or not numeric."""
    value = properties.get(key)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        logger.debug(f"Property {key}={value!r} is not an integer, using {default}")
        return default


def get_bool_property(properties: dict[str, str], key: str, default: bool) -> bool:
    """Return a boolean property; only ``true`` (any case) is truthy."""
    value = properties.get(key)
    if value is None:
        return default
    return value.strip().lower() == "true"


def _logical_lines(src: str):
    """Yield logical lines with comments, blanks and continuations resolved."""
    pending = None
    for raw in _LINE_BREAK_PATTERN.split(src):
        line = raw.lstrip(WHITESPACE)
        if pending is None:
            if not line or line[0] in COMMENT_MARKERS:
                continue
            pending = ""
        if _ends_with_continuation(line):
            pending += line[:-1]
            continue
        yield pending + line
        pending = None

    if pending:
        yield pending


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_key_value(line: str) -> tuple[str, str]:
    """Split a logical line at the first unescaped separator."""
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in KEY_VALUE_SEPARATORS or char in WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(WHITESPACE)
    if rest and rest[0] in KEY_VALUE_SEPARATORS:
        rest = rest[1:].lstrip(WHITESPACE)
    return key, rest


def _unescape(text: str) -> str:
    """Resolve backslash escapes.

    Raises:
        ValueError: If a ``\\u`` escape is not followed by four hex digits.
    """
    if "\\" not in text:
        return text

    chars = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            chars.append(char)
            index += 1
            continue

        escaped = text[index + 1]
        if escaped == "u":
            digits = text[index + 2 : index + 6]
            if len(digits) != 4 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            chars.append(chr(int(digits, 16)))
            index += 6
        else:
            chars.append(_ESCAPES.get(escaped, escaped))
            index += 2

    return "".join(chars)
