#!/usr/bin/env python3
"""Example: brotli-compressed strings. Decoding needs decompress=True to get strings back."""

from picomsgpack import decode, encode

record = {"greeting": "hello world this is a long string"}

plain = encode(record)
packed = encode(record, 9)
print("Plain (%d bytes):     %s" % (len(plain), plain.hex()))
print("Compressed (%d bytes): %s" % (len(packed), packed.hex()))

print("Without decompress:", decode(packed))
print("With decompress:   ", decode(packed, True))
