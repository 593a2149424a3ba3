"""
MessagePack timestamp extension (type -1).

Three payload layouts exist (https://github.com/msgpack/msgpack/blob/master/spec.md):

  timestamp 32: u32 seconds
  timestamp 64: u64 word, nanoseconds in the high 30 bits, seconds in the low 34
  timestamp 96: u32 nanoseconds, then i64 seconds

All three are read. Only the 32- and 96-bit layouts are written.
"""

from __future__ import annotations

import struct

from ..errors import InvalidTimestampLength
from ..types.structured import Date

TIMESTAMP_EXT_TYPE = -1

_U32_MAX = 0xFFFFFFFF
_SECONDS_34_MASK = 0x00000003FFFFFFFF


def is_timestamp(code: int) -> bool:
    return code == TIMESTAMP_EXT_TYPE


def decode_timestamp(payload: bytes) -> Date:
    """
    Decode a type -1 payload into a Date.

    Raises:
        InvalidTimestampLength: payload is not 4, 8 or 12 bytes.
        TimestampOutOfRange: the instant cannot be represented.
    """
    n = len(payload)
    if n == 4:
        seconds = struct.unpack(">I", payload)[0]
        nanoseconds = 0
    elif n == 8:
        word = struct.unpack(">Q", payload)[0]
        nanoseconds = word >> 34
        seconds = word & _SECONDS_34_MASK
    elif n == 12:
        nanoseconds, seconds = struct.unpack(">Iq", payload)
    else:
        raise InvalidTimestampLength(n)
    return Date(seconds, nanoseconds)


def encode_timestamp(seconds: int, nanoseconds: int = 0) -> bytes:
    """Smallest of the 32-bit and 96-bit layouts that holds the instant."""
    if nanoseconds == 0 and 0 <= seconds <= _U32_MAX:
        return struct.pack(">I", seconds)
    return struct.pack(">Iq", nanoseconds, seconds)


def encode_date(date: Date) -> bytes:
    return encode_timestamp(date.seconds, date.nanoseconds)


def unknown_ext_record(code: int, data: bytes) -> dict:
    """Record for an extension type with no decoder; there is no way back to ExtType."""
    return {"ext_type": code, "data": bytes(data)}


__all__: tuple[str, ...] = (
    "TIMESTAMP_EXT_TYPE",
    "decode_timestamp",
    "encode_date",
    "encode_timestamp",
    "is_timestamp",
    "unknown_ext_record",
)
