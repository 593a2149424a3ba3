"""
Structured values: the shell-side tree the codec bridges to and from MessagePack.

Plain Python types carry most variants (None, bool, int, float, str, bytes,
list, dict). The classes here cover the variants Python has no exact builtin
for: nanosecond dates, unit-tagged integers, lazy ranges and values that must
be materialized before they have a concrete shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable, Iterator

from ..errors import KeyCoercionFailed, TimestampOutOfRange

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_NANOS_PER_SECOND = 1_000_000_000
_SECONDS_PER_DAY = 86400
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date (any year)."""
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of _days_from_civil: (year, month, day)."""
    days += 719468
    era = days // 146097
    doe = days - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    return yoe + era * 400 + (month <= 2), month, day


# -262144-01-01T00:00:00Z through +262143-12-31T23:59:59Z
_MIN_SECONDS = _days_from_civil(-262144, 1, 1) * _SECONDS_PER_DAY
_MAX_SECONDS = _days_from_civil(262143, 12, 31) * _SECONDS_PER_DAY + _SECONDS_PER_DAY - 1
# datetime.min / datetime.max
_MIN_DATETIME_SECONDS = _days_from_civil(1, 1, 1) * _SECONDS_PER_DAY
_MAX_DATETIME_SECONDS = _days_from_civil(9999, 12, 31) * _SECONDS_PER_DAY + _SECONDS_PER_DAY - 1


@dataclass(frozen=True, order=True)
class Date:
    """
    UTC instant with nanosecond precision.

    Stored as whole seconds since the Unix epoch plus a nanosecond component
    in [0, 10**9). Years -262144 through 262143 of the proleptic Gregorian
    calendar are representable; only years 1-9999 convert to datetime.
    """

    seconds: int
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not (
            _MIN_SECONDS <= self.seconds <= _MAX_SECONDS
            and 0 <= self.nanoseconds < _NANOS_PER_SECOND
        ):
            raise TimestampOutOfRange(self.seconds, self.nanoseconds)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Date:
        """Naive datetimes are taken as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _EPOCH
        return cls(delta.days * _SECONDS_PER_DAY + delta.seconds, delta.microseconds * 1000)

    def to_datetime(self) -> datetime:
        """
        Aware UTC datetime; sub-microsecond digits are truncated.

        Raises:
            TimestampOutOfRange: the instant lies outside years 1-9999.
        """
        if not _MIN_DATETIME_SECONDS <= self.seconds <= _MAX_DATETIME_SECONDS:
            raise TimestampOutOfRange(self.seconds, self.nanoseconds)
        return _EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanoseconds // 1000
        )

    def isoformat(self) -> str:
        """RFC 3339 text with the shortest exact fraction (0, 3, 6 or 9 digits)."""
        days, secs = divmod(self.seconds, _SECONDS_PER_DAY)
        year, month, day = _civil_from_days(days)
        hour, rem = divmod(secs, 3600)
        minute, second = divmod(rem, 60)
        # four digits inside 0..9999, signed and at least four digits outside
        year_text = f"{year:04d}" if 0 <= year <= 9999 else f"{year:+05d}"
        ns = self.nanoseconds
        if ns == 0:
            fraction = ""
        elif ns % 1_000_000 == 0:
            fraction = f".{ns // 1_000_000:03d}"
        elif ns % 1000 == 0:
            fraction = f".{ns // 1000:06d}"
        else:
            fraction = f".{ns:09d}"
        return (
            f"{year_text}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
            f"{fraction}+00:00"
        )

    def __str__(self) -> str:
        return self.isoformat()


class Filesize(int):
    """Size in bytes."""

    def __repr__(self) -> str:
        return f"Filesize({int(self)})"


class Duration(int):
    """Duration in nanoseconds."""

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        whole = td.days * 86400 + td.seconds
        return cls(whole * _NANOS_PER_SECOND + td.microseconds * 1000)

    def __repr__(self) -> str:
        return f"Duration({int(self)})"


class Range:
    """
    Lazy numeric sequence from start towards end in steps of step.

    Works for ints and floats. The end bound is included unless
    inclusive=False. Nothing is produced until the range is iterated.
    """

    __slots__ = ("start", "end", "step", "inclusive")

    def __init__(self, start, end, step=1, inclusive: bool = True) -> None:
        if step == 0:
            raise ValueError("Range step must not be zero")
        self.start = start
        self.end = end
        self.step = step
        self.inclusive = inclusive

    def __iter__(self) -> Iterator:
        current = self.start
        index = 0
        while self._in_bounds(current):
            yield current
            index += 1
            # multiply instead of accumulating so float ranges do not drift
            current = self.start + index * self.step

    def _in_bounds(self, value) -> bool:
        if self.step > 0:
            return value <= self.end if self.inclusive else value < self.end
        return value >= self.end if self.inclusive else value > self.end

    def __repr__(self) -> str:
        op = ".." if self.inclusive else "..<"
        return f"Range({self.start}{op}{self.end}, step={self.step})"


class LazyRecord:
    """Record computed on access; collect() forces it into a dict."""

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], dict]) -> None:
        self._factory = factory

    def collect(self) -> dict:
        return dict(self._factory())


class CustomValue:
    """Host-defined value that knows how to turn itself into a plain structured value."""

    def to_base_value(self) -> Any:
        raise NotImplementedError


def is_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def coerce_string(value: Any) -> str:
    """
    Canonical text form of a scalar structured value.

    Used for wire map keys that are not already strings. Containers, None and
    anything without a text form raise KeyCoercionFailed.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as err:
            raise KeyCoercionFailed("binary (not valid UTF-8)") from err
    if isinstance(value, Date):
        return value.isoformat()
    raise KeyCoercionFailed(_type_name(value))


def _float_text(value: float) -> str:
    """Shortest round-trip digits, never in exponent form, no trailing '.0' (1.0 -> '1')."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _type_name(value: Any) -> str:
    if value is None:
        return "nothing"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "record"
    return type(value).__name__


__all__: tuple[str, ...] = (
    "CustomValue",
    "Date",
    "Duration",
    "Filesize",
    "INT64_MAX",
    "INT64_MIN",
    "LazyRecord",
    "Range",
    "coerce_string",
    "is_int64",
)
