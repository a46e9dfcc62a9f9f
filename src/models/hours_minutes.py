"""Whole hours and remainder minutes pair."""

from typing import NamedTuple


class HoursMinutes(NamedTuple):
    """A duration split into whole hours and remainder minutes."""

    hours: int | float
    minutes: int | float
