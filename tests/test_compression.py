"""Brotli string compression: strict on encode, lenient on decode."""

from __future__ import annotations

import brotli
import pytest

from picomsgpack import CompressionFailed, decode, encode
from picomsgpack.compression import check_quality, compress, try_decompress

LONG_STRING = "hello world this is a long string"

# {greeting: <brotli "hello world this is a long string">} from two different encoders
COMPRESSED_GREETINGS = [
    "81A86772656574696E67C41D1F2000F88D54B5BF64737B2B90B31CA411563A0358CEB1891C642AEE72",
    "81A86772656574696E67C41E1B200000A440C26022070E51EB7470C8C9C10E494B63D3B13C46C44B4E69",
]

NOT_BROTLI = b"\xff\xff\xff\xff\x00\x01\x02\x03"


def test_compressed_string_roundtrip() -> None:
    assert decode(encode(LONG_STRING, 9), True) == LONG_STRING


@pytest.mark.parametrize("quality", [0, 5, 11])
def test_compressed_record_roundtrip(quality: int) -> None:
    value = {"greeting": LONG_STRING, "n": 3, "items": ["a", "b"]}
    assert decode(encode(value, quality), True) == value


def test_compressed_string_is_plain_binary() -> None:
    data = encode(LONG_STRING, 9)
    assert data[0] == 0xC4
    assert decode(data) == brotli.compress(LONG_STRING.encode(), quality=9)


@pytest.mark.parametrize("hex_data", COMPRESSED_GREETINGS)
def test_decode_known_compressed_greetings(hex_data: str) -> None:
    assert decode(bytes.fromhex(hex_data), True) == {"greeting": LONG_STRING}


def test_decode_without_flag_keeps_binary() -> None:
    value = decode(bytes.fromhex(COMPRESSED_GREETINGS[0]))
    assert isinstance(value["greeting"], bytes)


def test_non_brotli_binary_falls_back_to_bytes() -> None:
    """Not every binary in a document is compressed; those stay as they were."""
    data = encode({"raw": NOT_BROTLI})
    assert decode(data, True) == {"raw": NOT_BROTLI}


def test_decompressed_invalid_utf8_is_replaced() -> None:
    data = encode(brotli.compress(b"ok \xff"))
    assert decode(data, True) == "ok \ufffd"


def test_compression_leaves_non_strings_alone() -> None:
    value = [1, 2.5, None, True, b"\x01"]
    assert encode(value, 9) == encode(value)


@pytest.mark.parametrize("quality", [-1, 12, 1.5, "9", True])
def test_invalid_quality_fails(quality) -> None:
    with pytest.raises(CompressionFailed) as exc_info:
        encode(LONG_STRING, quality)
    assert exc_info.value.kind == "compression_failed"
    assert exc_info.value.label == "Error compressing string with Brotli"


def test_invalid_quality_fails_even_without_strings() -> None:
    with pytest.raises(CompressionFailed):
        encode(1, 12)


def test_compress_and_try_decompress() -> None:
    packed = compress(b"payload", 4)
    assert try_decompress(packed) == b"payload"
    assert try_decompress(NOT_BROTLI) is None


def test_check_quality_bounds() -> None:
    assert check_quality(0) == 0
    assert check_quality(11) == 11
    with pytest.raises(CompressionFailed):
        check_quality(12)
