"""
Decode direction: MessagePack wire values -> structured values.

Every error aborts the whole call. The one tolerated failure is brotli
decompression of a binary when decompress=True: the binary is returned as is,
since not every binary in such a document is compressed.
"""

from __future__ import annotations

from typing import Any

from ..compression import try_decompress
from ..config import DEFAULT_MAX_DEPTH
from ..errors import IntegerOverflow, InvalidUtf8, NestingTooDeep
from ..ext import decode_timestamp, is_timestamp, unknown_ext_record
from ..serde import msgpack_unpack
from ..types.structured import coerce_string, is_int64
from ..types.wire import ExtType, Float32, WireMap, WireString


def _decode_binary(data: bytes, decompress: bool) -> Any:
    if decompress:
        inflated = try_decompress(data)
        if inflated is not None:
            return inflated.decode("utf-8", errors="replace")
    return bytes(data)


def _decode_string(wire: WireString) -> str:
    try:
        return wire.as_str()
    except UnicodeDecodeError as err:
        raise InvalidUtf8(err.reason) from err


def _decode_map(wire: WireMap, decompress: bool, depth: int, max_depth: int) -> dict:
    record: dict[str, Any] = {}
    for raw_key, raw_value in wire.pairs:
        key = _from_wire(raw_key, decompress, depth + 1, max_depth)
        if not isinstance(key, str):
            key = coerce_string(key)
        value = _from_wire(raw_value, decompress, depth + 1, max_depth)
        # last write wins and moves the key to its final position
        record.pop(key, None)
        record[key] = value
    return record


def _decode_ext(wire: ExtType) -> Any:
    if is_timestamp(wire.code):
        return decode_timestamp(wire.data)
    return unknown_ext_record(wire.code, wire.data)


def _from_wire(wire, decompress: bool, depth: int, max_depth: int) -> Any:
    if depth > max_depth:
        raise NestingTooDeep(max_depth)
    if wire is None:
        return None
    if isinstance(wire, bool):
        return wire
    if isinstance(wire, int):
        if not is_int64(wire):
            raise IntegerOverflow(wire)
        return wire
    if isinstance(wire, float):
        return wire
    if isinstance(wire, Float32):
        return float(wire.value)
    if isinstance(wire, WireString):
        return _decode_string(wire)
    if isinstance(wire, (bytes, bytearray, memoryview)):
        return _decode_binary(wire, decompress)
    if isinstance(wire, list):
        return [_from_wire(item, decompress, depth + 1, max_depth) for item in wire]
    if isinstance(wire, WireMap):
        return _decode_map(wire, decompress, depth, max_depth)
    if isinstance(wire, ExtType):
        return _decode_ext(wire)
    raise TypeError(f"not a msgpack wire value: {type(wire)}")


def from_wire(wire, decompress: bool = False, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """
    Convert a wire value into a structured value.

    Args:
        wire: Output of msgpack_unpack (or an equivalent hand-built tree).
        decompress: Try to brotli-decompress every binary into a string.
        max_depth: Maximum container nesting.

    Raises:
        IntegerOverflow, InvalidUtf8, InvalidTimestampLength,
        TimestampOutOfRange, KeyCoercionFailed, NestingTooDeep.
    """
    return _from_wire(wire, decompress, 0, max_depth)


def decode(data: bytes, decompress: bool = False, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """
    Decode MessagePack bytes into a structured value.

    With decompress=True, binaries that are valid brotli streams come back as
    strings (invalid UTF-8 replaced); other binaries stay bytes.

    Raises:
        MalformedWireData: data is not valid MessagePack.
        MsgpackError: any other conversion error (see from_wire).
    """
    return from_wire(msgpack_unpack(data, max_depth=max_depth), decompress, max_depth=max_depth)


__all__: tuple[str, ...] = ("decode", "from_wire")
