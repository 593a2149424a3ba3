"""Value bridge: structured values <-> MessagePack, both directions."""

from .decode import decode, from_wire
from .encode import encode, into_msgpack, to_wire

__all__: tuple[str, ...] = ("decode", "encode", "from_wire", "into_msgpack", "to_wire")
