"""Error types raised by the codec. Each carries a machine-readable kind and a short label."""

from __future__ import annotations


class MsgpackError(Exception):
    """Base exception for all codec errors."""

    kind = "msgpack_error"
    label = "MessagePack error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, message={self.message!r})"


class MalformedWireData(MsgpackError):
    """The byte stream is not valid MessagePack."""

    kind = "malformed_wire_data"
    label = "Invalid msgpack"


class IntegerOverflow(MsgpackError):
    """An integer does not fit the 64-bit signed range."""

    kind = "integer_overflow"
    label = "Integer overflow"

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"Encountered a msgpack integer outside the supported 64-bit range: {value}"
        )


class InvalidUtf8(MsgpackError):
    """A wire string is not valid UTF-8."""

    kind = "invalid_utf8"
    label = "Invalid UTF-8"

    def __init__(self, reason: str = "") -> None:
        message = "Encountered a msgpack string that was not valid UTF-8"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidTimestampLength(MsgpackError):
    """A timestamp extension payload is not 4, 8 or 12 bytes long."""

    kind = "invalid_timestamp_length"
    label = "Invalid timestamp length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Parsed ext type -1 (timestamp) with invalid length {length}")


class TimestampOutOfRange(MsgpackError):
    """A (seconds, nanoseconds) pair cannot be represented as a date."""

    kind = "timestamp_out_of_range"
    label = "Timestamp out of range"

    def __init__(self, seconds: int, nanoseconds: int) -> None:
        self.seconds = seconds
        self.nanoseconds = nanoseconds
        super().__init__(
            f"Timestamp value (seconds={seconds}, nanos={nanoseconds}) is out of range"
        )


class KeyCoercionFailed(MsgpackError):
    """A map key could not be converted to a string."""

    kind = "key_coercion_failed"
    label = "Invalid map key"

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Can't convert map key of type {type_name} to string")


class CompressionFailed(MsgpackError):
    """Brotli compression of a string failed during encode."""

    kind = "compression_failed"
    label = "Error compressing string with Brotli"


class NestingTooDeep(MsgpackError):
    """Input nesting exceeds the configured maximum depth."""

    kind = "nesting_too_deep"
    label = "Nesting too deep"

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Value nesting exceeds the maximum depth of {max_depth}")


class MaterializationFailed(MsgpackError):
    """A lazy or custom value could not be forced into a concrete value."""

    kind = "materialization_failed"
    label = "Cannot materialize value"


__all__: tuple[str, ...] = (
    "CompressionFailed",
    "IntegerOverflow",
    "InvalidTimestampLength",
    "InvalidUtf8",
    "KeyCoercionFailed",
    "MalformedWireData",
    "MaterializationFailed",
    "MsgpackError",
    "NestingTooDeep",
    "TimestampOutOfRange",
)
