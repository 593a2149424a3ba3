"""Defaults for the codec knobs. There is no config file; callers pass overrides."""

from __future__ import annotations

# Nesting bound applied by both the wire codec and the value bridge.
DEFAULT_MAX_DEPTH = 256

# Brotli quality range accepted on encode.
MIN_QUALITY = 0
MAX_QUALITY = 11

__all__: tuple[str, ...] = ("DEFAULT_MAX_DEPTH", "MAX_QUALITY", "MIN_QUALITY")
