"""Public SDK surface for glusterxattr.

This module provides a stable import path for accessor users. It
re-exports the client and value types, and offers module-level
functions bound to a default client configured from the environment.
"""

from __future__ import annotations

from core.attribute_names import (
    gfid_name,
    legacy_stime_name,
    stime_name,
    volume_id_name,
    xtime_name,
)
from core.config import GlusterXattrConfig
from core.errors import (
    AttributeUnavailableError,
    AttributeWriteError,
    GlusterXattrConfigError,
    GlusterXattrError,
    InvalidTimestampError,
    MalformedIdentifierError,
)
from core.types import Xtime
from store.attribute_store import AttributeStore, MemoryAttributeStore, OsAttributeStore
from store.gluster_attributes import GlusterAttributes, PathLike

__all__ = [
    "AttributeStore",
    "AttributeUnavailableError",
    "AttributeWriteError",
    "GlusterAttributes",
    "GlusterXattrConfig",
    "GlusterXattrConfigError",
    "GlusterXattrError",
    "InvalidTimestampError",
    "MalformedIdentifierError",
    "MemoryAttributeStore",
    "OsAttributeStore",
    "Xtime",
    "default_client",
    "get_gfid",
    "get_stime",
    "get_volume_id",
    "get_xtime",
    "gfid_name",
    "legacy_stime_name",
    "set_gfid",
    "set_stime",
    "set_volume_id",
    "set_xtime",
    "stime_name",
    "volume_id_name",
    "xtime_name",
]

_DEFAULT_CLIENT: GlusterAttributes | None = None


def default_client() -> GlusterAttributes:
    """Return the shared client configured from environment variables.

    Raises:
        GlusterXattrConfigError: If environment values are invalid.
    """
    global _DEFAULT_CLIENT
    if _DEFAULT_CLIENT is None:
        _DEFAULT_CLIENT = GlusterAttributes(config=GlusterXattrConfig.from_env())
    return _DEFAULT_CLIENT


def get_gfid(path: PathLike) -> str:
    """Get GFID (``trusted.gfid``).

    Example:
        >>> get_gfid("/bricks/b1/f1")  # doctest: +SKIP
        '0a118af0-3c20-4bdd-aded-694a17af6b5a'
    """
    return default_client().get_gfid(path)


def set_gfid(path: PathLike, gfid: str) -> None:
    """Set GFID (``trusted.gfid``)."""
    default_client().set_gfid(path, gfid)


def get_volume_id(path: PathLike) -> str:
    """Get Volume ID (``trusted.glusterfs.volume-id``)."""
    return default_client().get_volume_id(path)


def set_volume_id(path: PathLike, volume_id: str) -> None:
    """Set Volume ID (``trusted.glusterfs.volume-id``)."""
    default_client().set_volume_id(path, volume_id)


def get_xtime(path: PathLike, volume_id: str) -> Xtime:
    """Get Xtime (``trusted.glusterfs.<mastervol_uuid>.xtime``).

    Example:
        >>> get_xtime("/bricks/b1", "0a118af0-3c20-4bdd-aded-694a17af6b5a")  # doctest: +SKIP
        Xtime(seconds=1481540557, subseconds=16683)
    """
    return default_client().get_xtime(path, volume_id)


def set_xtime(path: PathLike, volume_id: str, seconds: int, subseconds: int) -> None:
    """Set Xtime (``trusted.glusterfs.<mastervol_uuid>.xtime``)."""
    default_client().set_xtime(path, volume_id, seconds, subseconds)


def get_stime(path: PathLike, master_id: str, slave_id: str) -> Xtime:
    """Get Stime (``trusted.glusterfs.<mastervol_uuid>.<slavevol_uuid>.stime``)."""
    return default_client().get_stime(path, master_id, slave_id)


def set_stime(
    path: PathLike,
    master_id: str,
    slave_id: str,
    seconds: int,
    subseconds: int,
) -> None:
    """Set Stime (``trusted.glusterfs.<mastervol_uuid>.<slavevol_uuid>.stime``)."""
    default_client().set_stime(path, master_id, slave_id, seconds, subseconds)
