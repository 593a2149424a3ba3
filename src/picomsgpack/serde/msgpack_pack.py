"""MessagePack pack for wire values. Always emits the smallest encoding; preserves map order."""

from __future__ import annotations

import struct

from ..errors import IntegerOverflow
from ..types.wire import ExtType, Float32, WireMap, WireString

_FIXEXT_MARKERS = {1: 0xD4, 2: 0xD5, 4: 0xD6, 8: 0xD7, 16: 0xD8}


def _pack_len(n: int, buf: bytearray, fix: int | None, fix_max: int, m8, m16, m32) -> None:
    """Write a length header: fix marker when it fits, then 8/16/32-bit forms (m8 may be None)."""
    if fix is not None and n <= fix_max:
        buf.append(fix | n)
    elif m8 is not None and n <= 0xFF:
        buf.extend((m8, n))
    elif n <= 0xFFFF:
        buf.append(m16)
        buf.extend(n.to_bytes(2, "big"))
    elif n <= 0xFFFFFFFF:
        buf.append(m32)
        buf.extend(n.to_bytes(4, "big"))
    else:
        raise ValueError(f"msgpack pack: length {n} exceeds 32-bit limit")


def _pack_int(obj: int, buf: bytearray) -> None:
    if 0 <= obj <= 0x7F:
        buf.append(obj)
    elif -32 <= obj < 0:
        buf.append((0x100 + obj) & 0xFF)
    elif 0x80 <= obj <= 0xFF:
        buf.extend((0xCC, obj))
    elif 0x100 <= obj <= 0xFFFF:
        buf.append(0xCD)
        buf.extend(obj.to_bytes(2, "big"))
    elif 0x10000 <= obj <= 0xFFFFFFFF:
        buf.append(0xCE)
        buf.extend(obj.to_bytes(4, "big"))
    elif 0x100000000 <= obj <= 0xFFFFFFFFFFFFFFFF:
        buf.append(0xCF)
        buf.extend(obj.to_bytes(8, "big"))
    elif -0x80 <= obj < 0:
        buf.extend((0xD0, (0x100 + obj) & 0xFF))
    elif -0x8000 <= obj < 0:
        buf.append(0xD1)
        buf.extend(obj.to_bytes(2, "big", signed=True))
    elif -0x80000000 <= obj < 0:
        buf.append(0xD2)
        buf.extend(obj.to_bytes(4, "big", signed=True))
    elif -0x8000000000000000 <= obj < 0:
        buf.append(0xD3)
        buf.extend(obj.to_bytes(8, "big", signed=True))
    else:
        raise IntegerOverflow(obj)


def _pack_ext(obj: ExtType, buf: bytearray) -> None:
    n = len(obj.data)
    marker = _FIXEXT_MARKERS.get(n)
    if marker is not None:
        buf.append(marker)
    else:
        _pack_len(n, buf, None, 0, 0xC7, 0xC8, 0xC9)
    buf.append(obj.code & 0xFF)
    buf.extend(obj.data)


def _msgpack_pack_obj(obj, buf: bytearray) -> None:
    if obj is None:
        buf.append(0xC0)
    elif isinstance(obj, bool):
        buf.append(0xC3 if obj else 0xC2)
    elif isinstance(obj, int):
        _pack_int(obj, buf)
    elif isinstance(obj, float):
        buf.append(0xCB)
        buf.extend(struct.pack(">d", obj))
    elif isinstance(obj, Float32):
        buf.append(0xCA)
        buf.extend(struct.pack(">f", obj.value))
    elif isinstance(obj, (WireString, str)):
        s = obj.data if isinstance(obj, WireString) else obj.encode("utf-8")
        _pack_len(len(s), buf, 0xA0, 31, 0xD9, 0xDA, 0xDB)
        buf.extend(s)
    elif isinstance(obj, (bytes, bytearray, memoryview)):
        s = bytes(obj)
        _pack_len(len(s), buf, None, 0, 0xC4, 0xC5, 0xC6)
        buf.extend(s)
    elif isinstance(obj, (list, tuple)):
        _pack_len(len(obj), buf, 0x90, 15, None, 0xDC, 0xDD)
        for x in obj:
            _msgpack_pack_obj(x, buf)
    elif isinstance(obj, WireMap):
        _pack_len(len(obj.pairs), buf, 0x80, 15, None, 0xDE, 0xDF)
        for k, v in obj.pairs:
            _msgpack_pack_obj(k, buf)
            _msgpack_pack_obj(v, buf)
    elif isinstance(obj, ExtType):
        _pack_ext(obj, buf)
    else:
        raise TypeError(f"msgpack pack: unsupported type {type(obj)}")


def msgpack_pack(obj) -> bytes:
    """
    Serialize a wire value to MessagePack bytes.

    Accepts None, bool, int, float, Float32, WireString (or str), bytes,
    list/tuple, WireMap and ExtType.

    Raises:
        IntegerOverflow: int outside [-2**63, 2**64 - 1].
        TypeError: value is not a wire value.
    """
    buf = bytearray()
    _msgpack_pack_obj(obj, buf)
    return bytes(buf)


__all__: tuple[str, ...] = ("msgpack_pack",)
