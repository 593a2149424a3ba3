"""Extension types: timestamp (-1) codec; other type codes surface as opaque records."""

from .timestamp import (
    TIMESTAMP_EXT_TYPE,
    decode_timestamp,
    encode_date,
    encode_timestamp,
    is_timestamp,
    unknown_ext_record,
)

__all__: tuple[str, ...] = (
    "TIMESTAMP_EXT_TYPE",
    "decode_timestamp",
    "encode_date",
    "encode_timestamp",
    "is_timestamp",
    "unknown_ext_record",
)
