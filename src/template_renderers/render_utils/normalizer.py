"""Slug generation: accent stripping and separator collapsing."""

import unicodedata
from typing import Optional

COMMON_SEPARATORS = frozenset(" &()-_=[{]}\\|;:,<.>/@")


def normalize(src: Optional[str]) -> str:
    """Normalize a string for inclusion in a URL path.

    The string is decomposed (NFD) so accents separate from their base
    letters, then only lowercased ASCII letters and digits are kept. Runs of
    separators become a single ``-`` between kept characters.

    Args:
        src: Source string.

    Returns:
        The slug. None and blank input return an empty string.

    Example:
        >>> normalize("News for January 6, 2023 (Paris)")
        'news-for-january-6-2023-paris'
        >>> normalize("Crème Brûlée")
        'creme-brulee'
    """
    if src is None or not src.strip():
        return ""

    chars = []
    pending_separator = False
    for char in unicodedata.normalize("NFD", src.strip()):
        if char > "\x7f":
            continue

        if char.isdigit() or "a" <= char <= "z" or "A" <= char <= "Z":
            if pending_separator and chars:
                chars.append("-")
            chars.append(char.lower())
            pending_separator = False
        elif char in COMMON_SEPARATORS:
            pending_separator = True

    return "".join(chars)
