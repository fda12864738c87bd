"""Text transformations: case conversion, abbreviation, ROT13 and friends."""

import unicodedata
from typing import Optional


def abbreviate(src: Optional[str], max_length: int, marker: Optional[str]) -> Optional[str]:
    """Abbreviate a string to the given length using a replacement marker.

    Args:
        src: Source string.
        max_length: Maximum length of the result. Negative disables abbreviation.
        marker: Marker appended to the abbreviated string (e.g. "...").

    Returns:
        The abbreviated string, or the source when no abbreviation is needed.
        None, blank input and a None marker are returned unchanged.

    Example:
        >>> abbreviate("This is a test.", 12, "...")
        'This is a...'
    """
    if src is None or not src.strip() or marker is None:
        return src

    if len(src) <= max_length or max_length < 0:
        return src

    return src[: max(max_length - len(marker), 0)] + marker


def capitalize_words(src: Optional[str]) -> Optional[str]:
    """Capitalize the first letter of each whitespace-delimited word.

    The remaining letters of each word are lowercased.

    Example:
        >>> capitalize_words("hELLo WoRLd")
        'Hello World'
    """
    if src is None:
        return None
    if not src:
        return ""

    chars = []
    capitalize_next = True
    for char in src:
        if char.isspace():
            capitalize_next = True
            chars.append(char)
        elif capitalize_next:
            chars.append(_upper_char(char))
            capitalize_next = False
        else:
            chars.append(_lower_char(char))
    return "".join(chars)


def lowercase(src: Optional[str]) -> Optional[str]:
    """Lowercase a string; None and blank input pass through."""
    if src is None or not src.strip():
        return src
    return src.lower()


def uppercase(src: Optional[str]) -> Optional[str]:
    """Uppercase a string; None and blank input pass through."""
    if src is None or not src.strip():
        return src
    return src.upper()


def uncapitalize(src: Optional[str]) -> Optional[str]:
    """Lowercase the first character of a string."""
    if not src:
        return src
    return src[0].lower() + src[1:]


def trim(src: Optional[str]) -> Optional[str]:
    """Strip leading and trailing whitespace; None and empty pass through."""
    if not src:
        return src
    return src.strip()


def plural(count: int, word: str, plural_word: str) -> str:
    """Return the plural form unless the count is exactly one."""
    if count == 1:
        return word
    return plural_word


def rot13(src: Optional[str]) -> str:
    """Translate a string to or from ROT13.

    Only ASCII letters are rotated; everything else is left as is.
    None is converted to an empty string.

    Example:
        >>> rot13("This is a test.")
        'Guvf vf n grfg.'
    """
    if src is None:
        return ""

    chars = []
    for char in src:
        if "a" <= char <= "z":
            chars.append(chr((ord(char) - ord("a") + 13) % 26 + ord("a")))
        elif "A" <= char <= "Z":
            chars.append(chr((ord(char) - ord("A") + 13) % 26 + ord("A")))
        else:
            chars.append(char)
    return "".join(chars)


def swap_case(src: Optional[str]) -> str:
    """Swap the case of every cased character.

    None and empty input return an empty string.

    Example:
        >>> swap_case("Hello World")
        'hELLO wORLD'
    """
    if not src:
        return ""

    chars = []
    for char in src:
        if char.isupper():
            chars.append(_lower_char(char))
        elif char.islower():
            chars.append(_upper_char(char))
        else:
            chars.append(char)
    return "".join(chars)


# Simple (single-character) case mapping. Full mappings that expand, such as
# "ß".upper() == "SS", fall back to the titlecase letter when that is a single
# character, then to the original character.
def _upper_char(char: str) -> str:
    converted = char.upper()
    if len(converted) == 1:
        return converted
    titled = char.title()
    return titled if len(titled) == 1 else char


# "İ".lower() is "i" plus a combining dot above; the base letter is kept.
def _lower_char(char: str) -> str:
    converted = char.lower()
    if len(converted) == 1:
        return converted
    if all(unicodedata.combining(mark) for mark in converted[1:]):
        return converted[0]
    return char
