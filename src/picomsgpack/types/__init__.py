"""Value models: structured (shell-side) values and MessagePack wire values."""

from .structured import (
    INT64_MAX,
    INT64_MIN,
    CustomValue,
    Date,
    Duration,
    Filesize,
    LazyRecord,
    Range,
    coerce_string,
    is_int64,
)
from .wire import ExtType, Float32, WireMap, WireString

__all__: tuple[str, ...] = (
    # Structured
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
    # Wire
    "ExtType",
    "Float32",
    "WireMap",
    "WireString",
)
