"""UUID attribute payload codec.

GFID and volume-id attributes store the raw 16-byte UUID. This module
converts between that form and canonical hyphenated text.
"""

from __future__ import annotations

import uuid

from core.constants import IDENTIFIER_BYTE_LENGTH
from core.errors import MalformedIdentifierError


def decode_identifier(raw: bytes) -> str:
    """Decode a 16-byte attribute value into UUID text.

    Args:
        raw: Attribute value bytes.

    Returns:
        Lowercase hyphenated UUID string.

    Raises:
        MalformedIdentifierError: If ``raw`` is not exactly 16 bytes.
    """
    if len(raw) != IDENTIFIER_BYTE_LENGTH:
        raise MalformedIdentifierError(
            f"Invalid identifier payload: expected {IDENTIFIER_BYTE_LENGTH} bytes, "
            f"got {len(raw)}. The attribute may be corrupt or not a UUID."
        )
    return str(uuid.UUID(bytes=bytes(raw)))


def encode_identifier(text: str) -> bytes:
    """Encode UUID text into its 16-byte attribute value.

    Args:
        text: UUID literal, any case.

    Returns:
        Raw UUID bytes.

    Raises:
        MalformedIdentifierError: If ``text`` is not a valid UUID.
    """
    if not isinstance(text, str):
        raise MalformedIdentifierError(
            f"Invalid identifier: expected UUID text, got {type(text).__name__}."
        )
    try:
        return uuid.UUID(text).bytes
    except ValueError as error:
        raise MalformedIdentifierError(
            f"Invalid identifier '{text}': expected a UUID such as "
            "'bb74c663-2552-41aa-a0ae-d4d94d9dd187'."
        ) from error
