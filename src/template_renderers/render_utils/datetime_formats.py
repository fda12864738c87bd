"""Date and time formatters: ISO 8601, RFC 2822 and Swatch Internet Time.

Patterns use LDML syntax and are rendered with Babel so month and weekday
names follow the requested locale. Every formatter takes the instant, zone
and locale as explicit keyword arguments; callers (the renderers) supply the
configured defaults.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from babel.dates import format_datetime

DEFAULT_LOCALE = "en_US"

ISO_8601_DATE_PATTERN = "yyyy-MM-dd"
ISO_8601_PATTERN = "yyyy-MM-dd'T'HH:mm:ssXXXXX"
ISO_8601_TIME_PATTERN = "HH:mm:ss"
ISO_8601_YEAR_PATTERN = "yyyy"
RFC_2822_PATTERN = "EEE, d MMM yyyy HH:mm:ss zzz"

# Biel Mean Time, the reference zone of Swatch Internet Time
BEAT_TIME_ZONE = timezone(timedelta(hours=1), "UTC+01:00")
# One beat is 86.4 seconds
DECISECONDS_PER_BEAT = 864

ZoneLike = Union[str, tzinfo, None]


def resolve_zone(tz: ZoneLike) -> tzinfo:
    """Return a tzinfo for an IANA zone id, a tzinfo, or None (system zone).

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If the zone id is unknown.
    """
    if tz is None:
        return datetime.now().astimezone().tzinfo
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def format_now(
    pattern: str,
    *,
    now: Optional[datetime] = None,
    tz: ZoneLike = None,
    locale: Optional[str] = None,
) -> str:
    """Format an instant (default: now) in the given zone with an LDML pattern.

    Args:
        pattern: LDML date/time pattern.
        now: Instant to format. Naive datetimes are taken as system local time.
        tz: Target zone id or tzinfo. Defaults to the system zone.
        locale: Locale for month and weekday names. Defaults to DEFAULT_LOCALE.

    Returns:
        The formatted date/time string.
    """
    zone = resolve_zone(tz)
    instant = (now or datetime.now(timezone.utc)).astimezone(zone)
    return format_datetime(instant, pattern, tzinfo=zone, locale=locale or DEFAULT_LOCALE)


def date_iso(*, now: Optional[datetime] = None, tz: ZoneLike = None, locale: Optional[str] = None) -> str:
    """Return the date in ISO 8601 format (``2023-01-06``)."""
    return format_now(ISO_8601_DATE_PATTERN, now=now, tz=tz, locale=locale)


def date_time_iso(*, now: Optional[datetime] = None, tz: ZoneLike = None, locale: Optional[str] = None) -> str:
    """Return the date and time in ISO 8601 format (``2023-01-06T12:30:45-08:00``)."""
    return format_now(ISO_8601_PATTERN, now=now, tz=tz, locale=locale)


def time_iso(*, now: Optional[datetime] = None, tz: ZoneLike = None, locale: Optional[str] = None) -> str:
    """Return the time in ISO 8601 format (``12:30:45``)."""
    return format_now(ISO_8601_TIME_PATTERN, now=now, tz=tz, locale=locale)


def year_iso(*, now: Optional[datetime] = None, tz: ZoneLike = None, locale: Optional[str] = None) -> str:
    """Return the four-digit year."""
    return format_now(ISO_8601_YEAR_PATTERN, now=now, tz=tz, locale=locale)


def date_time_rfc2822(*, now: Optional[datetime] = None, tz: ZoneLike = None, locale: Optional[str] = None) -> str:
    """Return the date and time in RFC 2822 format (``Fri, 6 Jan 2023 12:30:45 PST``)."""
    return format_now(RFC_2822_PATTERN, now=now, tz=tz, locale=locale)


def beat_time(now: Optional[datetime] = None) -> str:
    """Return the Swatch Internet (.beat) Time for the given instant.

    Args:
        now: Instant to convert. Defaults to the current time.

    Returns:
        The .beat time, e.g. ``@248``. Always three digits, ``@000`` to ``@999``.
    """
    instant = (now or datetime.now(timezone.utc)).astimezone(BEAT_TIME_ZONE)
    seconds = instant.second + instant.minute * 60 + instant.hour * 3600
    beats = seconds * 10 // DECISECONDS_PER_BEAT
    return f"@{beats:03d}"
