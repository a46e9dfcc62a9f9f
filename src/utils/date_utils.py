"""Date utility functions for business workflow scripts.

Every public function takes a single options mapping (keyword arguments are
merged over it) and validates its required keys before doing any work.
Zero is a valid value for any numeric option.
"""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Any

import numpy as np
from dateutil.relativedelta import relativedelta

from config.settings_pydantic import settings
from src.models.hours_minutes import HoursMinutes
from src.utils.timezone import epoch_ms, resolve_utc_offset, shift_ms
from src.utils.validators import merge_options, validate_required_arguments

logger = logging.getLogger("workdate")

SHORT_MONTH: Mapping[int, str] = MappingProxyType(
    {
        0: "Jan",
        1: "Feb",
        2: "Mar",
        3: "Apr",
        4: "May",
        5: "Jun",
        6: "Jul",
        7: "Aug",
        8: "Sep",
        9: "Oct",
        10: "Nov",
        11: "Dec",
    }
)

TWO_PLACES = Decimal("0.01")


def add_days(options: Mapping[str, Any] | None = None, **kwargs: Any) -> datetime:
    """Add days to a date.

    Args:
        options: Options mapping with keys:
            i_date: Base datetime.
            days: Number of days to add. May be fractional or negative.
        **kwargs: Options given as keywords.

    Returns:
        New datetime, days * 24h later in absolute time.

    Raises:
        MissingArgumentError: If i_date or days is missing.
    """
    params = merge_options({"i_date": "", "days": ""}, options, **kwargs)
    validate_required_arguments(params, ["i_date", "days"])

    return shift_ms(params["i_date"], params["days"] * settings.milliseconds_per_day)


def subtract_days(options: Mapping[str, Any] | None = None, **kwargs: Any) -> datetime:
    """Subtract days from a date.

    Args:
        options: Options mapping with keys:
            i_date: Base datetime.
            days: Number of days to subtract.
        **kwargs: Options given as keywords.

    Returns:
        New datetime, days * 24h earlier in absolute time.

    Raises:
        MissingArgumentError: If i_date or days is missing.
    """
    params = merge_options({"i_date": "", "days": ""}, options, **kwargs)
    validate_required_arguments(params, ["i_date", "days"])

    return shift_ms(params["i_date"], -params["days"] * settings.milliseconds_per_day)


def _truncated_mod(value: int | float, divisor: int) -> int | float:
    """Remainder with the sign of the dividend."""
    if isinstance(value, int):
        remainder = abs(value) % divisor
        return -remainder if value < 0 else remainder
    return math.fmod(value, divisor)


def _round_half_away(value: float) -> float:
    return float(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def mins_to_dec_hours(options: Mapping[str, Any] | None = None, **kwargs: Any) -> float:
    """Convert minutes to decimal hours, e.g. 150 minutes is 2.5 hours.

    The part below one hour is rounded to two decimal places, so 100 minutes
    is 1.67 hours.

    Args:
        options: Options mapping with key minutes.
        **kwargs: Options given as keywords.

    Returns:
        Decimal hours.

    Raises:
        MissingArgumentError: If minutes is missing.
    """
    params = merge_options({"minutes": ""}, options, **kwargs)
    validate_required_arguments(params, ["minutes"])

    minutes = params["minutes"]
    full_hours = math.floor(minutes / 60)
    fraction = _truncated_mod(minutes, 60) / 60 or 0
    return full_hours + _round_half_away(fraction)


def mins_to_hours_mins(options: Mapping[str, Any] | None = None, **kwargs: Any) -> HoursMinutes:
    """Convert minutes to whole hours and remaining minutes, e.g. 150 is (2, 30).

    Raises:
        MissingArgumentError: If minutes is missing.
    """
    params = merge_options({"minutes": ""}, options, **kwargs)
    validate_required_arguments(params, ["minutes"])

    minutes = params["minutes"]
    return HoursMinutes(math.floor(minutes / 60), _truncated_mod(minutes, 60) or 0)


def later_date(options: Mapping[str, Any] | None = None, **kwargs: Any) -> int:
    """Find which of two dates is later.

    Think list indices: 0 means date_zero is later, 1 means date_one is
    later. Equal dates give -1. Dates are compared to the millisecond.

    Args:
        options: Options mapping with keys:
            date_zero: First datetime.
            date_one: Second datetime.
        **kwargs: Options given as keywords.

    Returns:
        0, 1 or -1.

    Raises:
        MissingArgumentError: If either date is missing.
    """
    params = merge_options({"date_zero": "", "date_one": ""}, options, **kwargs)
    validate_required_arguments(params, ["date_zero", "date_one"])

    date_zero = params["date_zero"]
    date_one = params["date_one"]
    if date_zero == "" or date_one == "" or epoch_ms(date_zero) == epoch_ms(date_one):
        return -1
    if epoch_ms(date_zero) > epoch_ms(date_one):
        return 0
    return 1


def _calendar_day(value: date, day_offset: int) -> date:
    """Rebuild a date from year, month and day + day_offset.

    Day-of-month values outside the month roll into the neighbouring month,
    so day 0 is the last day of the previous month.
    """
    return date(value.year, value.month, 1) + relativedelta(days=value.day + day_offset - 1)


def working_days(options: Mapping[str, Any] | None = None, **kwargs: Any) -> int:
    """Count working days (Monday to Friday) between two dates.

    Only the calendar dates are used; time of day is ignored. Unless
    included is set, both input dates are left out of the count: Friday
    26 June 2020 to Tuesday 30 June 2020 is 1 working day (the Monday).

    Args:
        options: Options mapping with keys:
            start_date: First date.
            end_date: Last date.
            included: Whether to count the start and end dates. Defaults to False.
        **kwargs: Options given as keywords.

    Returns:
        Number of working days, 0 if the range is empty.

    Raises:
        MissingArgumentError: If start_date or end_date is missing.
    """
    params = merge_options(
        {"start_date": "", "end_date": "", "included": False},
        options,
        **kwargs,
    )
    validate_required_arguments(params, ["start_date", "end_date"])

    shift = 0 if params["included"] else 1
    start = _calendar_day(params["start_date"], shift)
    end = _calendar_day(params["end_date"], -shift)

    if start > end:
        return 0

    logger.debug(f"Counting working days from {start} to {end}")
    # busday_count excludes the end date
    return int(np.busday_count(start, end + timedelta(days=1)))


def _set_time_of_day(
    value: datetime,
    hour: int | float,
    minutes: int | float,
    utc_offset: timedelta,
) -> datetime:
    # Offset in hours, positive west of UTC
    offset_hours = -(utc_offset / timedelta(hours=1)) or 0
    midnight = value.replace(hour=0, minute=0, second=0)
    return midnight + timedelta(hours=int(hour - offset_hours), minutes=int(minutes))


def set_end_of_day(options: Mapping[str, Any] | None = None, **kwargs: Any) -> datetime:
    """Set the time of a date to the end of the working day.

    The hour is shifted by the UTC offset, so with a non-zero offset the
    requested hour is the UTC hour. Seconds are cleared, microseconds are
    kept. Hours or minutes out of range roll into the next unit.

    Args:
        options: Options mapping with keys:
            i_date: Base datetime.
            end_hour: Hour to set, 24 hour clock.
            end_mins: Minutes to set.
            utc_offset: Optional timedelta (local minus UTC). Defaults to
                settings.utc_offset_minutes, then the local offset of i_date.
        **kwargs: Options given as keywords.

    Returns:
        New datetime on the same date.

    Raises:
        MissingArgumentError: If i_date, end_hour or end_mins is missing.
    """
    params = merge_options(
        {"i_date": "", "end_hour": "", "end_mins": "", "utc_offset": None},
        options,
        **kwargs,
    )
    validate_required_arguments(params, ["i_date", "end_hour", "end_mins"])

    i_date = params["i_date"]
    utc_offset = resolve_utc_offset(i_date, params["utc_offset"])
    return _set_time_of_day(i_date, params["end_hour"], params["end_mins"], utc_offset)


def set_start_of_day(options: Mapping[str, Any] | None = None, **kwargs: Any) -> datetime:
    """Set the time of a date to the start of the working day.

    Same adjustment as set_end_of_day, with start_hour and start_mins.

    Raises:
        MissingArgumentError: If i_date, start_hour or start_mins is missing.
    """
    params = merge_options(
        {"i_date": "", "start_hour": "", "start_mins": "", "utc_offset": None},
        options,
        **kwargs,
    )
    validate_required_arguments(params, ["i_date", "start_hour", "start_mins"])

    i_date = params["i_date"]
    utc_offset = resolve_utc_offset(i_date, params["utc_offset"])
    return _set_time_of_day(i_date, params["start_hour"], params["start_mins"] or 0, utc_offset)
