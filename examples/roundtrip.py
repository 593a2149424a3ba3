#!/usr/bin/env python3
"""Example: encode a record to MessagePack and read it back."""

from picomsgpack import Date, Filesize, decode, encode

record = {
    "greeting": "hello world",
    "size": Filesize(2048),
    "created": Date(1_700_000_000, 250_000_000),
    "tags": ["a", "b"],
}

data = encode(record)
print("Encoded:", data.hex())

back = decode(data)
print("Decoded:", back)
print("Created:", back["created"].isoformat())
