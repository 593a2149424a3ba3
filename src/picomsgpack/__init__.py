"""
MessagePack <-> structured values: ordered records, nanosecond dates, optional
brotli-compressed strings. Pure Python; the wire codec can be cythonized.
"""

from .__about__ import __version__
from .bridge import decode, encode, from_wire, into_msgpack, to_wire
from .config import DEFAULT_MAX_DEPTH
from .errors import (
    CompressionFailed,
    IntegerOverflow,
    InvalidTimestampLength,
    InvalidUtf8,
    KeyCoercionFailed,
    MalformedWireData,
    MaterializationFailed,
    MsgpackError,
    NestingTooDeep,
    TimestampOutOfRange,
)
from .ext import decode_timestamp, encode_timestamp
from .serde import msgpack_pack, msgpack_unpack
from .types import (
    CustomValue,
    Date,
    Duration,
    ExtType,
    Filesize,
    Float32,
    LazyRecord,
    Range,
    WireMap,
    WireString,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Bridge
    "decode",
    "encode",
    "from_wire",
    "into_msgpack",
    "to_wire",
    # Serde
    "msgpack_pack",
    "msgpack_unpack",
    # Extensions
    "decode_timestamp",
    "encode_timestamp",
    # Values
    "CustomValue",
    "Date",
    "Duration",
    "Filesize",
    "LazyRecord",
    "Range",
    # Wire values
    "ExtType",
    "Float32",
    "WireMap",
    "WireString",
    # Config
    "DEFAULT_MAX_DEPTH",
    # Errors
    "CompressionFailed",
    "IntegerOverflow",
    "InvalidTimestampLength",
    "InvalidUtf8",
    "KeyCoercionFailed",
    "MalformedWireData",
    "MaterializationFailed",
    "MsgpackError",
    "NestingTooDeep",
    "TimestampOutOfRange",
)
