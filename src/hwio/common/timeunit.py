"""
Time units accepted by the timed digital output operations.
"""

from enum import Enum


class TimeUnit(Enum):
    """Time granularities."""
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"


_MILLIS_PER_UNIT = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: 1000,
    TimeUnit.MINUTES: 60 * 1000,
    TimeUnit.HOURS: 60 * 60 * 1000,
}


def to_millis(value: int, unit: TimeUnit) -> int:
    """
    Convert a timed-operation value to milliseconds.

    Only millisecond, second, minute and hour granularity is supported;
    sub-millisecond and day units are rejected.

    Args:
        value: Amount of time in ``unit``.
        unit: Time unit of ``value``.

    Returns:
        Duration in milliseconds.

    Raises:
        ValueError: If the unit is not supported.
    """
    if not isinstance(unit, TimeUnit):
        raise ValueError(f"Unsupported time unit: {unit!r}")
    if unit in (TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS, TimeUnit.DAYS):
        raise ValueError(f"TimeUnit.{unit.name} is not supported")
    return value * _MILLIS_PER_UNIT[unit]
