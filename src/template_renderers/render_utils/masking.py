"""Character masking for sensitive values such as card or account numbers."""

from typing import Optional

DEFAULT_MASK = "*"


def mask(
    src: Optional[str],
    mask: str = DEFAULT_MASK,
    unmasked: int = 0,
    from_start: bool = False,
) -> Optional[str]:
    """Mask the characters of a string.

    Each masked position contributes one full copy of ``mask``, so a
    multi-character mask makes the output longer than the source.

    Args:
        src: Source string.
        mask: String used in place of each masked character.
        unmasked: Number of characters left visible. Values <= 0 or >= the
            source length mask the whole string.
        from_start: Keep the visible characters at the start instead of the end.

    Returns:
        The masked string. None and empty input are returned unchanged.

    Example:
        >>> mask("4342256562440179", "?", 4, False)
        '????????????0179'
    """
    if not src:
        return src

    length = len(src)
    if unmasked <= 0 or unmasked >= length:
        return mask * length

    hidden = mask * (length - unmasked)
    if from_start:
        return src[:unmasked] + hidden
    return hidden + src[length - unmasked :]
