"""Compression layer: brotli for string payloads."""

from ._brotli import check_quality, compress, try_decompress

__all__: tuple[str, ...] = ("check_quality", "compress", "try_decompress")
