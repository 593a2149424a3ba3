"""Wire codec tests: byte layouts checked against the msgpack distribution."""

from __future__ import annotations

import msgpack
import pytest

from picomsgpack import (
    ExtType,
    Float32,
    IntegerOverflow,
    MalformedWireData,
    NestingTooDeep,
    WireMap,
    WireString,
    msgpack_pack,
    msgpack_unpack,
)
from picomsgpack.serde import msgpack_unpack_with_offset

# Boundary integers for every int family
INTS = [
    0,
    0x7F,
    0x80,
    0xFF,
    0x100,
    0xFFFF,
    0x10000,
    0xFFFFFFFF,
    0x100000000,
    2**63 - 1,
    2**64 - 1,
    -1,
    -32,
    -33,
    -128,
    -129,
    -0x8000,
    -0x8001,
    -0x80000000,
    -0x80000001,
    -(2**63),
]

# Lengths on both sides of every fix/8/16 boundary
LENGTHS = [0, 1, 15, 16, 31, 32, 255, 256, 0xFFFF, 0x10000]


def _oracle(obj) -> bytes:
    return msgpack.packb(obj, use_bin_type=True)


@pytest.mark.parametrize("value", INTS)
def test_pack_int_matches_msgpack(value: int) -> None:
    assert msgpack_pack(value) == _oracle(value)


@pytest.mark.parametrize("n", LENGTHS)
def test_pack_str_bin_array_map_headers(n: int) -> None:
    text = "x" * n
    assert msgpack_pack(WireString.from_str(text)) == _oracle(text)
    assert msgpack_pack(b"\x01" * n) == _oracle(b"\x01" * n)
    assert msgpack_pack([None] * n) == _oracle([None] * n)
    pairs = [(i, i) for i in range(n)]
    assert msgpack_pack(WireMap(pairs)) == _oracle(dict(pairs))


def test_pack_scalars() -> None:
    assert msgpack_pack(None) == b"\xc0"
    assert msgpack_pack(True) == b"\xc3"
    assert msgpack_pack(False) == b"\xc2"
    assert msgpack_pack(1.5) == _oracle(1.5)
    assert msgpack_pack(Float32(1.5)) == b"\xca\x3f\xc0\x00\x00"


def test_pack_plain_str_same_as_wire_string() -> None:
    assert msgpack_pack("hello") == msgpack_pack(WireString(b"hello"))


def test_pack_map_keeps_duplicate_pairs_in_order() -> None:
    wire = WireMap([(WireString(b"a"), 1), (WireString(b"a"), 2)])
    assert msgpack_pack(wire) == bytes.fromhex("82a16101a16102")


@pytest.mark.parametrize(
    "length, header",
    [
        (1, "d405"),
        (2, "d505"),
        (4, "d605"),
        (8, "d705"),
        (16, "d805"),
        (3, "c70305"),
        (300, "c8012c05"),
    ],
)
def test_pack_ext_headers(length: int, header: str) -> None:
    data = bytes(length)
    assert msgpack_pack(ExtType(5, data)) == bytes.fromhex(header) + data
    assert msgpack_pack(ExtType(5, data)) == _oracle(msgpack.ExtType(5, data))


def test_pack_ext_negative_code() -> None:
    assert msgpack_pack(ExtType(-1, bytes(4))) == bytes.fromhex("d6ff00000000")


def test_pack_rejects_out_of_range_int() -> None:
    with pytest.raises(IntegerOverflow):
        msgpack_pack(2**64)
    with pytest.raises(IntegerOverflow):
        msgpack_pack(-(2**63) - 1)


def test_pack_rejects_non_wire_value() -> None:
    with pytest.raises(TypeError):
        msgpack_pack({"a": 1})


def test_ext_type_code_range() -> None:
    with pytest.raises(ValueError):
        ExtType(128, b"")


@pytest.mark.parametrize("value", INTS)
def test_unpack_int(value: int) -> None:
    assert msgpack_unpack(_oracle(value)) == value


def test_unpack_containers() -> None:
    data = _oracle({"k": [1, "two", b"\x03", None, True, 2.5]})
    assert msgpack_unpack(data) == WireMap(
        [(WireString(b"k"), [1, WireString(b"two"), b"\x03", None, True, 2.5])]
    )


def test_unpack_float32() -> None:
    assert msgpack_unpack(b"\xca\x3f\xc0\x00\x00") == Float32(1.5)


def test_unpack_keeps_invalid_utf8_as_raw_string() -> None:
    value = msgpack_unpack(b"\xa2\xff\xfe")
    assert value == WireString(b"\xff\xfe")
    assert value.is_valid_utf8() is False


def test_unpack_ext_signed_code() -> None:
    assert msgpack_unpack(bytes.fromhex("d4fe2a")) == ExtType(-2, b"\x2a")
    assert msgpack_unpack(bytes.fromhex("c70305010203")) == ExtType(5, b"\x01\x02\x03")


def test_unpack_keeps_duplicate_keys() -> None:
    wire = msgpack_unpack(bytes.fromhex("82a16101a16102"))
    assert wire.pairs == [(WireString(b"a"), 1), (WireString(b"a"), 2)]


@pytest.mark.parametrize(
    "data",
    [
        "",
        "c1",
        "a56161",
        "9201",
        "ddffffffff",
        "cd01",
        "d6ff0000",
        "c70aff00",
        "81a161",
    ],
)
def test_unpack_malformed(data: str) -> None:
    with pytest.raises(MalformedWireData) as exc_info:
        msgpack_unpack(bytes.fromhex(data))
    assert exc_info.value.kind == "malformed_wire_data"
    assert exc_info.value.label == "Invalid msgpack"


def test_unpack_ignores_trailing_bytes() -> None:
    assert msgpack_unpack(b"\x01\x02\x03") == 1
    assert msgpack_unpack_with_offset(b"\x01\x02\x03") == (1, 1)


def test_unpack_max_depth() -> None:
    data = b"\x91" * 10 + b"\x90"
    assert msgpack_unpack(data, max_depth=10) is not None
    with pytest.raises(NestingTooDeep):
        msgpack_unpack(data, max_depth=9)


def test_unpack_default_depth_is_bounded() -> None:
    with pytest.raises(NestingTooDeep):
        msgpack_unpack(b"\x91" * 1000 + b"\xc0")
