"""Local UTC offset and epoch conversion helpers."""

from datetime import datetime, timedelta, timezone

from dateutil import tz

from config.settings_pydantic import settings

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)


def to_aware(value: datetime) -> datetime:
    """Attach the host local zone to a naive datetime.

    Args:
        value: Naive (local wall-clock) or aware datetime.

    Returns:
        Aware datetime for the same instant.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.tzlocal())
    return value


def epoch_ms(value: datetime) -> int:
    """Get the epoch-millisecond value of a datetime.

    Args:
        value: Naive (local wall-clock) or aware datetime.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z, floored.
    """
    return (to_aware(value) - EPOCH) // ONE_MILLISECOND


def shift_ms(value: datetime, milliseconds: float) -> datetime:
    """Move a datetime by an absolute number of milliseconds.

    The shift is done in UTC so DST transitions do not affect it. The result
    keeps the awareness of the input: naive stays naive local time, aware
    keeps its tzinfo.

    Args:
        value: Datetime to move.
        milliseconds: Signed number of milliseconds.

    Returns:
        New datetime.
    """
    shifted = to_aware(value).astimezone(timezone.utc) + timedelta(milliseconds=milliseconds)
    if value.tzinfo is None:
        return shifted.astimezone(tz.tzlocal()).replace(tzinfo=None)
    return shifted.astimezone(value.tzinfo)


def local_utc_offset(value: datetime) -> timedelta:
    """Get the UTC offset in effect for a datetime.

    Naive datetimes use the host local zone at that date, so the result
    follows daylight saving.
    """
    return to_aware(value).utcoffset() or timedelta(0)


def resolve_utc_offset(value: datetime, utc_offset: timedelta | None = None) -> timedelta:
    """Pick the UTC offset to use for start/end-of-day adjustment.

    Args:
        value: Datetime being adjusted.
        utc_offset: Explicit offset. Takes precedence when given.

    Returns:
        Explicit offset, else the configured override, else the local offset.
    """
    if utc_offset is not None:
        return utc_offset
    if settings.utc_offset_minutes is not None:
        return timedelta(minutes=settings.utc_offset_minutes)
    return local_utc_offset(value)
