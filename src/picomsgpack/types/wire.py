"""
Wire values: an in-memory mirror of the MessagePack type system.

Nil, Bool, Integer, Float64, Binary and Array use None, bool, int, float,
bytes and list. The remaining variants need wrappers because Python cannot
tell them apart otherwise: single-precision floats, strings whose bytes have
not been validated yet, maps that may hold duplicate or unhashable keys, and
extension values with negative type codes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Float32:
    """32-bit float on the wire (0xCA)."""

    value: float


@dataclass(frozen=True)
class WireString:
    """MessagePack str family; raw bytes, UTF-8 validity checked on demand."""

    data: bytes

    @classmethod
    def from_str(cls, text: str) -> WireString:
        return cls(text.encode("utf-8"))

    def is_valid_utf8(self) -> bool:
        try:
            self.data.decode("utf-8")
        except UnicodeDecodeError:
            return False
        return True

    def as_str(self) -> str:
        """Strict decode; raises UnicodeDecodeError on invalid input."""
        return self.data.decode("utf-8")


@dataclass
class WireMap:
    """MessagePack map as ordered (key, value) pairs."""

    pairs: list[tuple[Any, Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass(frozen=True)
class ExtType:
    """Extension value: signed 8-bit type code plus opaque payload."""

    code: int
    data: bytes

    def __post_init__(self) -> None:
        if not -128 <= self.code <= 127:
            raise ValueError(f"ext type code must be in -128..127, got {self.code}")


__all__: tuple[str, ...] = ("ExtType", "Float32", "WireMap", "WireString")
