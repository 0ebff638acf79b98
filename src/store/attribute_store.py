"""Raw extended attribute stores.

This module defines the store protocol used by the accessors, an
implementation backed by the host OS through the ``xattr`` library,
and a dictionary-backed implementation for tests and dry runs.
"""

from __future__ import annotations

import errno
import os
from typing import Protocol

import xattr

from core.errors import AttributeUnavailableError, AttributeWriteError

_UNAVAILABLE_ERRNOS = frozenset(
    {errno.ENOENT, errno.ENOTSUP, errno.EOPNOTSUPP, errno.ENOTDIR}
)
_MISSING_ATTRIBUTE_ERRNO = getattr(errno, "ENODATA", errno.ENOENT)


class AttributeStore(Protocol):
    """Key-value store addressed by filesystem path and attribute name."""

    def get(self, path: str, name: str) -> bytes: ...

    def set(self, path: str, name: str, value: bytes) -> None: ...


class OsAttributeStore:
    """Extended attribute store backed by the host filesystem."""

    def __init__(self, follow_symlinks: bool = True) -> None:
        self._symlink = not follow_symlinks

    def get(self, path: str, name: str) -> bytes:
        """Read one attribute value.

        Args:
            path: File or directory path.
            name: Fully qualified attribute name.

        Returns:
            Raw attribute bytes.

        Raises:
            AttributeUnavailableError: If the attribute cannot be read.
        """
        try:
            return xattr.getxattr(os.fspath(path), name, symlink=self._symlink)
        except OSError as error:
            raise AttributeUnavailableError(
                f"Cannot read attribute '{name}' on '{path}': {error.strerror or error}.",
                errno=error.errno,
            ) from error

    def set(self, path: str, name: str, value: bytes) -> None:
        """Write one attribute value.

        Args:
            path: File or directory path.
            name: Fully qualified attribute name.
            value: Raw attribute bytes.

        Raises:
            AttributeUnavailableError: If the path or xattr support is missing.
            AttributeWriteError: If the filesystem rejects the write.
        """
        try:
            xattr.setxattr(os.fspath(path), name, value, symlink=self._symlink)
        except OSError as error:
            message = f"Cannot write attribute '{name}' on '{path}': {error.strerror or error}."
            if error.errno in _UNAVAILABLE_ERRNOS:
                raise AttributeUnavailableError(message, errno=error.errno) from error
            raise AttributeWriteError(message, errno=error.errno) from error


class MemoryAttributeStore:
    """In-memory attribute store keyed by ``(path, name)``.

    Paths must be registered with :meth:`add_path` before attributes
    can be written, mirroring a filesystem where the file must exist.
    """

    def __init__(self) -> None:
        self._paths: set[str] = set()
        self._values: dict[tuple[str, str], bytes] = {}

    def add_path(self, path: str) -> None:
        self._paths.add(os.fspath(path))

    def get(self, path: str, name: str) -> bytes:
        key = (os.fspath(path), name)
        if key[0] not in self._paths:
            raise AttributeUnavailableError(
                f"Cannot read attribute '{name}' on '{path}': No such file or directory.",
                errno=errno.ENOENT,
            )
        if key not in self._values:
            raise AttributeUnavailableError(
                f"Cannot read attribute '{name}' on '{path}': No data available.",
                errno=_MISSING_ATTRIBUTE_ERRNO,
            )
        return self._values[key]

    def set(self, path: str, name: str, value: bytes) -> None:
        key = (os.fspath(path), name)
        if key[0] not in self._paths:
            raise AttributeUnavailableError(
                f"Cannot write attribute '{name}' on '{path}': No such file or directory.",
                errno=errno.ENOENT,
            )
        self._values[key] = bytes(value)
