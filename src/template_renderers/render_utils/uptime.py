"""Uptime formatting, e.g. ``1 day 2 hours 5 minutes``.

Durations are decomposed greedily into 365-day years, 30-day months, weeks,
days, hours and minutes. Years and months are fixed-length approximations,
not calendar units.
"""

from typing import Optional

from template_renderers.render_utils.text import plural

MILLIS_PER_MINUTE = 60 * 1000
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR

DEFAULT_UPTIME_LABELS: dict[str, str] = {
    "year": " year ",
    "years": " years ",
    "month": " month ",
    "months": " months ",
    "week": " week ",
    "weeks": " weeks ",
    "day": " day ",
    "days": " days ",
    "hour": " hour ",
    "hours": " hours ",
    "minute": " minute",
    "minutes": " minutes",
}

# (singular key, plural key, unit length in milliseconds), coarsest first
_UNITS = (
    ("year", "years", 365 * MILLIS_PER_DAY),
    ("month", "months", 30 * MILLIS_PER_DAY),
    ("week", "weeks", 7 * MILLIS_PER_DAY),
    ("day", "days", MILLIS_PER_DAY),
    ("hour", "hours", MILLIS_PER_HOUR),
)


def uptime(millis: int, properties: Optional[dict[str, str]] = None) -> str:
    """Format an uptime given in milliseconds.

    Args:
        millis: Duration in milliseconds. Negative values read as zero.
        properties: Optional label overrides keyed by unit name
            (``year``/``years`` ... ``minute``/``minutes``).

    Returns:
        The formatted uptime, stripped of surrounding whitespace. Minutes are
        always present when no coarser unit is.

    Example:
        >>> uptime(3_660_000)
        '1 hour 1 minute'
        >>> uptime(0)
        '0 minutes'
    """
    labels = dict(DEFAULT_UPTIME_LABELS)
    if properties:
        labels.update(properties)

    parts = []
    remaining = max(millis, 0)
    for singular, plural_key, unit_millis in _UNITS:
        count, remaining = divmod(remaining, unit_millis)
        if count > 0:
            parts.append(f"{count}{plural(count, labels[singular], labels[plural_key])}")

    minutes = remaining // MILLIS_PER_MINUTE
    if minutes > 0 or not parts:
        parts.append(f"{minutes}{plural(minutes, labels['minute'], labels['minutes'])}")

    return "".join(parts).strip()
