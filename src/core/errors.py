"""glusterxattr exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Attribute I/O and payload codecs raise distinct types so callers can
tell a missing attribute from a corrupt one.
"""

from __future__ import annotations


class GlusterXattrError(Exception):
    """Base exception for all glusterxattr failures."""


class GlusterXattrConfigError(GlusterXattrError):
    """Raised for invalid runtime configuration."""


class AttributeUnavailableError(GlusterXattrError):
    """Raised when an attribute, its path, or xattr support is missing."""

    def __init__(self, message: str, errno: int | None = None) -> None:
        super().__init__(message)
        self.errno = errno


class AttributeWriteError(GlusterXattrError):
    """Raised when the attribute store rejects a write."""

    def __init__(self, message: str, errno: int | None = None) -> None:
        super().__init__(message)
        self.errno = errno


class MalformedIdentifierError(GlusterXattrError):
    """Raised for UUID text or bytes that cannot be converted."""


class InvalidTimestampError(GlusterXattrError):
    """Raised for timestamp fields outside the unsigned 32-bit range."""
