"""
Encode direction: structured values -> MessagePack wire values.

Values with no MessagePack counterpart (callables, exceptions, arbitrary
objects) become nil. Strings are brotli-compressed into plain binaries when a
quality is given; a compression failure aborts the call.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from ..compression import check_quality, compress
from ..config import DEFAULT_MAX_DEPTH
from ..errors import IntegerOverflow, MaterializationFailed, MsgpackError, NestingTooDeep
from ..ext import TIMESTAMP_EXT_TYPE, encode_date
from ..serde import msgpack_pack
from ..types.structured import (
    CustomValue,
    Date,
    Duration,
    LazyRecord,
    Range,
    coerce_string,
    is_int64,
)
from ..types.wire import ExtType, WireMap, WireString


def _materialize(value: Any) -> Any:
    try:
        if isinstance(value, LazyRecord):
            return value.collect()
        return value.to_base_value()
    except MsgpackError:
        raise
    except Exception as err:
        raise MaterializationFailed(
            f"Cannot materialize {type(value).__name__}: {err}"
        ) from err


def _encode_string(text: str, quality: int | None):
    if quality is None:
        return WireString.from_str(text)
    return compress(text.encode("utf-8"), quality)


def _to_wire(value: Any, quality: int | None, depth: int, max_depth: int):
    if depth > max_depth:
        raise NestingTooDeep(max_depth)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        # Filesize and Duration are int subclasses and go out as their raw count
        if not is_int64(value):
            raise IntegerOverflow(int(value))
        return int(value)
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        return _encode_string(value, quality)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple, Range, range)):
        return [_to_wire(item, quality, depth + 1, max_depth) for item in value]
    if isinstance(value, dict):
        return WireMap(
            [
                (
                    WireString.from_str(coerce_string(key)),
                    _to_wire(item, quality, depth + 1, max_depth),
                )
                for key, item in value.items()
            ]
        )
    if isinstance(value, timedelta):
        return _to_wire(Duration.from_timedelta(value), quality, depth, max_depth)
    if isinstance(value, datetime):
        value = Date.from_datetime(value)
    if isinstance(value, Date):
        return ExtType(TIMESTAMP_EXT_TYPE, encode_date(value))
    if isinstance(value, (LazyRecord, CustomValue)):
        # each materialization step counts as a nesting level
        return _to_wire(_materialize(value), quality, depth + 1, max_depth)
    return None


def to_wire(
    value: Any,
    compression_quality: int | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
):
    """
    Convert a structured value into a wire value.

    Args:
        value: Structured value (see picomsgpack.types).
        compression_quality: Brotli quality 0-11 applied to every string, or None.
        max_depth: Maximum container nesting.

    Raises:
        CompressionFailed: bad quality or brotli error.
        IntegerOverflow: int outside the 64-bit signed range.
        KeyCoercionFailed: record key with no text form (None, containers).
        TimestampOutOfRange: datetime outside the Date range.
        MaterializationFailed: LazyRecord / CustomValue could not be forced.
        NestingTooDeep: nesting exceeds max_depth.
    """
    if compression_quality is not None:
        check_quality(compression_quality)
    return _to_wire(value, compression_quality, 0, max_depth)


def encode(
    value: Any,
    compression_quality: int | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> bytes:
    """Encode a structured value as MessagePack bytes (see to_wire)."""
    return msgpack_pack(to_wire(value, compression_quality, max_depth=max_depth))


def into_msgpack(value: Any) -> bytes:
    """Encode without compression."""
    return encode(value)


__all__: tuple[str, ...] = ("encode", "into_msgpack", "to_wire")
