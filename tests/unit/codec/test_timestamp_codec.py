"""Unit tests for the xtime payload codec."""

from __future__ import annotations

import pytest

from codec.timestamp_codec import decode_xtime, encode_xtime
from core.constants import TIMESTAMP_BYTE_LENGTH
from core.errors import InvalidTimestampError
from core.types import Xtime


def test_encode_xtime_is_big_endian_pair() -> None:
    """Encoded payload should be seconds then subseconds, big-endian."""
    payload = encode_xtime(100, 2)

    assert len(payload) == TIMESTAMP_BYTE_LENGTH
    assert payload == bytes.fromhex("00000064") + bytes.fromhex("00000002")


@pytest.mark.parametrize(
    ("seconds", "subseconds"),
    [(0, 0), (100, 2), (4294967295, 4294967295), (1481540557, 2_500_000)],
)
def test_xtime_roundtrip(seconds: int, subseconds: int) -> None:
    """Decoding an encoded pair should return the same pair."""
    decoded = decode_xtime(encode_xtime(seconds, subseconds))

    assert decoded.as_tuple() == (seconds, subseconds)


def test_decode_empty_payload_yields_zero_pair() -> None:
    """Empty payload should decode leniently to (0, 0)."""
    assert decode_xtime(b"") == Xtime(0, 0)


def test_decode_four_byte_payload_zeroes_subseconds() -> None:
    """A payload holding only seconds should zero the subseconds."""
    decoded = decode_xtime(b"\x00\x00\x00\x64")

    assert decoded == Xtime(seconds=100, subseconds=0)


def test_decode_partial_field_reads_as_zero() -> None:
    """Fewer than four bytes for a field should read as zero."""
    assert decode_xtime(b"\x00\x00\x00\x64\x00\x02") == Xtime(100, 0)
    assert decode_xtime(b"\x01\x02") == Xtime(0, 0)


def test_decode_ignores_trailing_bytes() -> None:
    """Bytes after the eighth should be ignored."""
    payload = encode_xtime(7, 9) + b"\xff\xff"

    assert decode_xtime(payload) == Xtime(7, 9)


@pytest.mark.parametrize(
    ("seconds", "subseconds"),
    [(-1, 0), (0, 2**32), (1.5, 0), (True, 0)],
)
def test_encode_rejects_values_outside_u32(seconds: object, subseconds: object) -> None:
    """Non-u32 timestamp fields should raise a domain error."""
    with pytest.raises(InvalidTimestampError):
        encode_xtime(seconds, subseconds)  # type: ignore[arg-type]


def test_xtime_unpacks_like_a_pair() -> None:
    """Xtime should support tuple-style unpacking."""
    seconds, subseconds = Xtime(3, 4)

    assert (seconds, subseconds) == (3, 4)
