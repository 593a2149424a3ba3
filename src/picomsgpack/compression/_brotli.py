"""Brotli for string payloads. Compression failures are fatal; decompression failures are not."""

from __future__ import annotations

import logging

import brotli

from ..config import MAX_QUALITY, MIN_QUALITY
from ..errors import CompressionFailed

log = logging.getLogger(__name__)


def check_quality(quality: int) -> int:
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise CompressionFailed(f"Brotli quality must be an integer, got {quality!r}")
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise CompressionFailed(
            f"Brotli quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}"
        )
    return quality


def compress(data: bytes, quality: int) -> bytes:
    """
    Brotli-compress data at the given quality (0-11).

    Raises:
        CompressionFailed: invalid quality or encoder error.
    """
    check_quality(quality)
    try:
        return brotli.compress(data, quality=quality)
    except brotli.error as err:
        raise CompressionFailed(f"Error {err}") from err


def try_decompress(data: bytes) -> bytes | None:
    """Decompressed bytes, or None when data is not a complete brotli stream."""
    try:
        return brotli.decompress(data)
    except brotli.error as err:
        log.debug("Binary of %d bytes is not brotli data (%s), keeping raw bytes", len(data), err)
        return None


__all__: tuple[str, ...] = ("check_quality", "compress", "try_decompress")
