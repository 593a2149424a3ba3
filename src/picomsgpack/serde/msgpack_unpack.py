"""MessagePack unpack into wire values. Reads one value; keeps map pairs in order, duplicates included."""

from __future__ import annotations

import logging
import struct

from ..config import DEFAULT_MAX_DEPTH
from ..errors import MalformedWireData, NestingTooDeep
from ..types.wire import ExtType, Float32, WireMap, WireString

log = logging.getLogger(__name__)

# marker -> (kind, width of the length/value field)
_SIZED = {
    0xC4: ("bin", 1),
    0xC5: ("bin", 2),
    0xC6: ("bin", 4),
    0xC7: ("ext", 1),
    0xC8: ("ext", 2),
    0xC9: ("ext", 4),
    0xD9: ("str", 1),
    0xDA: ("str", 2),
    0xDB: ("str", 4),
    0xDC: ("array", 2),
    0xDD: ("array", 4),
    0xDE: ("map", 2),
    0xDF: ("map", 4),
}
_FIXEXT_LENGTHS = {0xD4: 1, 0xD5: 2, 0xD6: 4, 0xD7: 8, 0xD8: 16}


def _take(data: bytes, pos: int, n: int) -> bytes:
    end = pos + n
    if end > len(data):
        raise MalformedWireData(
            f"Unexpected end of msgpack data: need {n} bytes at offset {pos}, "
            f"have {len(data) - pos}"
        )
    return data[pos:end]


def _read_uint(data: bytes, pos: int, n: int) -> int:
    return int.from_bytes(_take(data, pos, n), "big")


def _unpack_obj(data: bytes, pos: int, depth: int, max_depth: int):
    """Return (value, new_pos)."""
    if depth > max_depth:
        raise NestingTooDeep(max_depth)
    b = _take(data, pos, 1)[0]
    pos += 1

    if b <= 0x7F:
        return b, pos
    if b >= 0xE0:
        return b - 0x100, pos
    if 0xA0 <= b <= 0xBF:
        n = b & 0x1F
        return WireString(_take(data, pos, n)), pos + n
    if 0x90 <= b <= 0x9F:
        return _unpack_array(data, pos, b & 0x0F, depth, max_depth)
    if 0x80 <= b <= 0x8F:
        return _unpack_map(data, pos, b & 0x0F, depth, max_depth)

    if b == 0xC0:
        return None, pos
    if b == 0xC2:
        return False, pos
    if b == 0xC3:
        return True, pos
    if b == 0xCA:
        return Float32(struct.unpack(">f", _take(data, pos, 4))[0]), pos + 4
    if b == 0xCB:
        return struct.unpack(">d", _take(data, pos, 8))[0], pos + 8
    if 0xCC <= b <= 0xCF:
        n = 1 << (b - 0xCC)
        return _read_uint(data, pos, n), pos + n
    if 0xD0 <= b <= 0xD3:
        n = 1 << (b - 0xD0)
        return int.from_bytes(_take(data, pos, n), "big", signed=True), pos + n
    if b in _FIXEXT_LENGTHS:
        n = _FIXEXT_LENGTHS[b]
        return _unpack_ext(data, pos, n)

    sized = _SIZED.get(b)
    if sized is None:
        # only 0xC1 is left: reserved, never used
        raise MalformedWireData(f"Invalid msgpack marker 0x{b:02X} at offset {pos - 1}")
    kind, width = sized
    n = _read_uint(data, pos, width)
    pos += width
    if kind == "str":
        return WireString(_take(data, pos, n)), pos + n
    if kind == "bin":
        return _take(data, pos, n), pos + n
    if kind == "ext":
        return _unpack_ext(data, pos, n)
    if kind == "array":
        return _unpack_array(data, pos, n, depth, max_depth)
    return _unpack_map(data, pos, n, depth, max_depth)


def _unpack_ext(data: bytes, pos: int, n: int):
    code = _take(data, pos, 1)[0]
    if code >= 0x80:
        code -= 0x100
    pos += 1
    return ExtType(code, _take(data, pos, n)), pos + n


def _unpack_array(data: bytes, pos: int, n: int, depth: int, max_depth: int):
    items = []
    for _ in range(n):
        item, pos = _unpack_obj(data, pos, depth + 1, max_depth)
        items.append(item)
    return items, pos


def _unpack_map(data: bytes, pos: int, n: int, depth: int, max_depth: int):
    pairs = []
    for _ in range(n):
        key, pos = _unpack_obj(data, pos, depth + 1, max_depth)
        value, pos = _unpack_obj(data, pos, depth + 1, max_depth)
        pairs.append((key, value))
    return WireMap(pairs), pos


def msgpack_unpack_with_offset(
    data: bytes, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[object, int]:
    """Unpack the first value in data; return (wire value, bytes consumed)."""
    return _unpack_obj(bytes(data), 0, 0, max_depth)


def msgpack_unpack(data: bytes, *, max_depth: int = DEFAULT_MAX_DEPTH):
    """
    Parse one MessagePack value from the start of data.

    Bytes after the first complete value are ignored.

    Args:
        data: Encoded bytes.
        max_depth: Maximum container nesting.

    Returns:
        Wire value (None, bool, int, float, Float32, WireString, bytes, list,
        WireMap or ExtType).

    Raises:
        MalformedWireData: truncated input or reserved marker.
        NestingTooDeep: nesting exceeds max_depth.
    """
    value, consumed = msgpack_unpack_with_offset(data, max_depth=max_depth)
    if consumed < len(data):
        log.debug("Ignoring %d trailing bytes after msgpack value", len(data) - consumed)
    return value


__all__: tuple[str, ...] = ("msgpack_unpack", "msgpack_unpack_with_offset")
