"""Xtime/stime attribute payload codec.

Timestamps are stored as two big-endian unsigned 32-bit integers,
seconds followed by subseconds. Decoding is lenient: a field whose
four bytes are missing reads as zero, so truncated values written by
older tooling still load.
"""

from __future__ import annotations

import struct

from core.constants import (
    TIMESTAMP_BYTE_LENGTH,
    TIMESTAMP_FIELD_BYTE_LENGTH,
    TIMESTAMP_FIELD_MAX,
)
from core.errors import InvalidTimestampError
from core.types import Xtime

_FIELD_FORMAT = ">I"
_PAIR_FORMAT = ">II"


def decode_xtime(raw: bytes) -> Xtime:
    """Decode an attribute value into an Xtime.

    Args:
        raw: Attribute value bytes, normally 8. Extra bytes are ignored.

    Returns:
        Decoded timestamp; missing fields are 0.
    """
    payload = bytes(raw[:TIMESTAMP_BYTE_LENGTH])
    return Xtime(
        seconds=_read_field(payload, 0),
        subseconds=_read_field(payload, TIMESTAMP_FIELD_BYTE_LENGTH),
    )


def encode_xtime(seconds: int, subseconds: int) -> bytes:
    """Encode a timestamp pair into its 8-byte attribute value.

    Args:
        seconds: Seconds component.
        subseconds: Sub-second count.

    Returns:
        Big-endian payload bytes.

    Raises:
        InvalidTimestampError: If a field is not an unsigned 32-bit integer.
    """
    _check_field("seconds", seconds)
    _check_field("subseconds", subseconds)
    return struct.pack(_PAIR_FORMAT, seconds, subseconds)


def _read_field(raw: bytes, offset: int) -> int:
    if len(raw) < offset + TIMESTAMP_FIELD_BYTE_LENGTH:
        return 0
    (value,) = struct.unpack_from(_FIELD_FORMAT, raw, offset)
    return int(value)


def _check_field(field_name: str, value: int) -> None:
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimestampError(
            f"Invalid timestamp {field_name}: expected integer, got {type(value).__name__}."
        )
    if not 0 <= value <= TIMESTAMP_FIELD_MAX:
        raise InvalidTimestampError(
            f"Invalid timestamp {field_name} {value}: "
            f"expected a value between 0 and {TIMESTAMP_FIELD_MAX}."
        )
