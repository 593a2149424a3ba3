"""Serialization / deserialization (serde): MessagePack bytes <-> wire values."""

from .msgpack_pack import msgpack_pack
from .msgpack_unpack import msgpack_unpack, msgpack_unpack_with_offset

__all__: tuple[str, ...] = (
    "msgpack_pack",
    "msgpack_unpack",
    "msgpack_unpack_with_offset",
)
