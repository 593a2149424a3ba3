#!/usr/bin/env python3
"""
Example: host-side plumbing. The codec never touches files; the caller reads
and writes bytes and maps its flags onto decompress / compression_quality.

Usage: python examples/from_file.py FILE [--brotli]
"""

import argparse
import sys

from picomsgpack import MsgpackError, decode

parser = argparse.ArgumentParser(description="Print a MessagePack file as structured data")
parser.add_argument("path")
parser.add_argument("-b", "--brotli", action="store_true", help="Decompress brotli encoded binary data")
args = parser.parse_args()

with open(args.path, "rb") as f:
    data = f.read()

try:
    print(decode(data, args.brotli))
except MsgpackError as err:
    print(f"{err.label}: {err}", file=sys.stderr)
    sys.exit(1)
