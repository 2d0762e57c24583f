"""Time and date-and-time conversions for millisecond TIME and second DT values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from motorsim.runtime import get_time

__all__ = [
    "TimeErrorCode",
    "AsTimeError",
    "DstState",
    "TimeDevice",
    "TimeStructure",
    "DTStructure",
    "TIME_MAX",
    "TIME_MIN",
    "DATE_AND_TIME_MAX",
    "time_to_structure",
    "structure_to_time",
    "dt_to_structure",
    "structure_to_dt",
    "asc_time_structure",
    "asc_dt_structure",
    "asc_time",
    "asc_dt",
    "diff_t",
    "diff_dt",
    "clock_ms",
]

TIME_MAX = 2073600000
TIME_MIN = -2073600000
DATE_AND_TIME_MAX = 4102444799

_MS_PER_DAY = 86_400_000
_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class TimeErrorCode(enum.IntEnum):
    """Status codes of the time functions."""

    INVALID_PARAMETER = 33210
    INVALID_LEN = 33211
    INVALID_DTSTRUCTURE = 33212
    AR = 33213


class AsTimeError(ValueError):
    """Raised when a time conversion gets an invalid argument."""

    def __init__(self, code: TimeErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = TimeErrorCode(code)


class DstState(enum.IntEnum):
    """Daylight-saving state of a local time."""

    NORMAL_TIME = 1
    DAYLIGHT_SAVING_TIME = 2
    NO_DST = 3


class TimeDevice(enum.IntEnum):
    """Source the system clock is synchronised from."""

    REAL_TIME_CLOCK = 1
    TIME_SERVER = 2
    REDUND_INTERFACE = 3


@dataclass
class TimeStructure:
    """A TIME value split into days, hours, minutes, seconds and fractions."""

    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisec: int = 0
    microsec: int = 0


@dataclass
class DTStructure:
    """A DATE_AND_TIME value split into calendar fields; ``wday`` 0 is Sunday."""

    year: int = 1970
    month: int = 1
    day: int = 1
    wday: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisec: int = 0
    microsec: int = 0


def _check_time(time_ms: int) -> None:
    if not TIME_MIN <= time_ms <= TIME_MAX:
        raise AsTimeError(
            TimeErrorCode.INVALID_PARAMETER,
            f"TIME {time_ms} ms outside [{TIME_MIN}, {TIME_MAX}]",
        )


def _check_dt(dt: int) -> None:
    if not 0 <= dt <= DATE_AND_TIME_MAX:
        raise AsTimeError(
            TimeErrorCode.INVALID_PARAMETER,
            f"DATE_AND_TIME {dt} outside [0, {DATE_AND_TIME_MAX}]",
        )


def time_to_structure(time_ms: int) -> TimeStructure:
    """Split a TIME in milliseconds; negative times get a negative day."""
    _check_time(time_ms)
    day, rest = divmod(time_ms, _MS_PER_DAY)
    hour, rest = divmod(rest, _MS_PER_HOUR)
    minute, rest = divmod(rest, _MS_PER_MINUTE)
    second, millisec = divmod(rest, 1000)
    return TimeStructure(day, hour, minute, second, millisec, 0)


def structure_to_time(structure: TimeStructure) -> int:
    """Combine a TimeStructure into a TIME in milliseconds."""
    s = structure
    if not (
        -128 <= s.day <= 127
        and 0 <= s.hour < 24
        and 0 <= s.minute < 60
        and 0 <= s.second < 60
        and 0 <= s.millisec < 1000
        and 0 <= s.microsec < 1000
    ):
        raise AsTimeError(TimeErrorCode.INVALID_DTSTRUCTURE, f"invalid time structure {s}")
    time_ms = (
        s.day * _MS_PER_DAY
        + s.hour * _MS_PER_HOUR
        + s.minute * _MS_PER_MINUTE
        + s.second * 1000
        + s.millisec
    )
    _check_time(time_ms)
    return time_ms


def dt_to_structure(dt: int) -> DTStructure:
    """Split a DATE_AND_TIME (seconds since 1970-01-01 UTC) into calendar fields."""
    _check_dt(dt)
    moment = _EPOCH + timedelta(seconds=dt)
    return DTStructure(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        wday=(moment.weekday() + 1) % 7,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
    )


def _to_datetime(structure: DTStructure) -> datetime:
    s = structure
    if not (0 <= s.millisec < 1000 and 0 <= s.microsec < 1000):
        raise AsTimeError(TimeErrorCode.INVALID_DTSTRUCTURE, f"invalid date structure {s}")
    try:
        return datetime(
            s.year, s.month, s.day, s.hour, s.minute, s.second, tzinfo=timezone.utc
        )
    except ValueError as exc:
        raise AsTimeError(
            TimeErrorCode.INVALID_DTSTRUCTURE, f"invalid date structure {s}"
        ) from exc


def structure_to_dt(structure: DTStructure) -> int:
    """Combine calendar fields into a DATE_AND_TIME; ``wday`` is ignored."""
    dt = int((_to_datetime(structure) - _EPOCH).total_seconds())
    _check_dt(dt)
    return dt


def asc_time(time_ms: int) -> str:
    """Format a TIME as an IEC literal such as ``T#1d2h3m4s5ms``."""
    _check_time(time_ms)
    sign = "-" if time_ms < 0 else ""
    rest = abs(time_ms)
    parts = []
    for unit, size in (("d", _MS_PER_DAY), ("h", _MS_PER_HOUR), ("m", _MS_PER_MINUTE), ("s", 1000)):
        count, rest = divmod(rest, size)
        if count:
            parts.append(f"{count}{unit}")
    if rest or not parts:
        parts.append(f"{rest}ms")
    return f"T#{sign}{''.join(parts)}"


def asc_time_structure(structure: TimeStructure) -> str:
    """Format a TimeStructure the way :func:`asc_time` formats a TIME."""
    return asc_time(structure_to_time(structure))


def asc_dt_structure(structure: DTStructure) -> str:
    """Format calendar fields as ``Www Mmm dd hh:mm:ss yyyy``."""
    structure_to_dt(structure)
    moment = _to_datetime(structure)
    return (
        f"{_WEEKDAYS[(moment.weekday() + 1) % 7]} {_MONTHS[moment.month - 1]} "
        f"{moment.day:2d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} "
        f"{moment.year}"
    )


def asc_dt(dt: int) -> str:
    """Format a DATE_AND_TIME as ``Www Mmm dd hh:mm:ss yyyy``."""
    return asc_dt_structure(dt_to_structure(dt))


def diff_t(time2: int, time1: int) -> int:
    """Milliseconds from ``time1`` to ``time2``; ``time2`` must not be earlier."""
    if time2 < time1:
        raise AsTimeError(TimeErrorCode.INVALID_PARAMETER, "time2 is earlier than time1")
    return time2 - time1


def diff_dt(dt2: int, dt1: int) -> int:
    """Seconds from ``dt1`` to ``dt2``; ``dt2`` must not be earlier."""
    if dt2 < dt1:
        raise AsTimeError(TimeErrorCode.INVALID_PARAMETER, "dt2 is earlier than dt1")
    return dt2 - dt1


def clock_ms() -> int:
    """Return a monotonic clock in milliseconds."""
    return get_time()