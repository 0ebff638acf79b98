"""Typed GlusterFS geo-replication attribute accessors.

This module composes attribute naming, payload codecs and a raw
attribute store into get/set pairs for GFID, volume id, xtime and
stime. Every call performs at most one store read or write.
"""

from __future__ import annotations

import os

from codec.identifier_codec import decode_identifier, encode_identifier
from codec.timestamp_codec import decode_xtime, encode_xtime
from core.attribute_names import (
    gfid_name,
    legacy_stime_name,
    stime_name,
    volume_id_name,
    xtime_name,
)
from core.config import GlusterXattrConfig
from core.errors import GlusterXattrError
from core.logging_config import get_logger
from core.types import Xtime
from store.attribute_store import AttributeStore, OsAttributeStore

PathLike = str | os.PathLike[str]


class GlusterAttributes:
    """Accessor client for GlusterFS brick attributes.

    The client holds no per-path state; concurrent callers touching the
    same attribute rely on the atomicity of individual store calls.
    """

    def __init__(
        self,
        store: AttributeStore | None = None,
        config: GlusterXattrConfig | None = None,
    ) -> None:
        """Initialize accessors from a store and config.

        Args:
            store: Raw attribute store. Defaults to the OS store.
            config: Runtime configuration. Defaults to built-in defaults.
        """
        self._config = config or GlusterXattrConfig()
        if store is None:
            store = OsAttributeStore(follow_symlinks=self._config.follow_symlinks)
        self._store = store
        self._logger = get_logger(__name__, self._config.log_level)

    @property
    def config(self) -> GlusterXattrConfig:
        return self._config

    def get_gfid(self, path: PathLike) -> str:
        """Read the GFID (``trusted.gfid``) of a brick entry."""
        return decode_identifier(self._read(path, gfid_name(self._config.namespace)))

    def set_gfid(self, path: PathLike, gfid: str) -> None:
        """Write the GFID (``trusted.gfid``) of a brick entry."""
        self._write(path, gfid_name(self._config.namespace), encode_identifier(gfid))

    def get_volume_id(self, path: PathLike) -> str:
        """Read the volume id (``trusted.glusterfs.volume-id``) of a brick root."""
        return decode_identifier(self._read(path, volume_id_name(self._config.namespace)))

    def set_volume_id(self, path: PathLike, volume_id: str) -> None:
        """Write the volume id (``trusted.glusterfs.volume-id``) of a brick root."""
        self._write(
            path,
            volume_id_name(self._config.namespace),
            encode_identifier(volume_id),
        )

    def get_xtime(self, path: PathLike, volume_id: str) -> Xtime:
        """Read the xtime recorded for a master volume.

        Args:
            path: Brick entry path.
            volume_id: Master volume UUID text.

        Returns:
            Decoded timestamp. Truncated values decode with zeroed fields.

        Raises:
            AttributeUnavailableError: If the attribute cannot be read.
        """
        return decode_xtime(self._read(path, xtime_name(volume_id, self._config.namespace)))

    def set_xtime(self, path: PathLike, volume_id: str, seconds: int, subseconds: int) -> None:
        """Write the xtime for a master volume.

        Args:
            path: Brick entry path.
            volume_id: Master volume UUID text.
            seconds: Seconds component.
            subseconds: Sub-second count.

        Raises:
            InvalidTimestampError: If a field does not fit in 32 bits.
            AttributeUnavailableError: If the path or xattr support is missing.
            AttributeWriteError: If the write is rejected.
        """
        payload = encode_xtime(seconds, subseconds)
        self._write(path, xtime_name(volume_id, self._config.namespace), payload)

    def get_stime(self, path: PathLike, master_id: str, slave_id: str) -> Xtime:
        """Read the stime recorded for a master/slave volume pair."""
        return decode_xtime(self._read(path, self.stime_attribute_name(master_id, slave_id)))

    def set_stime(
        self,
        path: PathLike,
        master_id: str,
        slave_id: str,
        seconds: int,
        subseconds: int,
    ) -> None:
        """Write the stime for a master/slave volume pair."""
        payload = encode_xtime(seconds, subseconds)
        self._write(path, self.stime_attribute_name(master_id, slave_id), payload)

    def stime_attribute_name(self, master_id: str, slave_id: str) -> str:
        """Return the stime attribute name this client reads and writes."""
        if self._config.legacy_stime_names:
            return legacy_stime_name(master_id, slave_id, self._config.namespace)
        return stime_name(master_id, slave_id, self._config.namespace)

    def _read(self, path: PathLike, name: str) -> bytes:
        path_text = os.fspath(path)
        try:
            value = self._store.get(path_text, name)
        except GlusterXattrError as error:
            self._logger.warning("xattr_read_failed", path=path_text, name=name, error=str(error))
            raise
        self._logger.debug("xattr_read", path=path_text, name=name, size=len(value))
        return value

    def _write(self, path: PathLike, name: str, value: bytes) -> None:
        path_text = os.fspath(path)
        try:
            self._store.set(path_text, name, value)
        except GlusterXattrError as error:
            self._logger.warning("xattr_write_failed", path=path_text, name=name, error=str(error))
            raise
        self._logger.debug("xattr_written", path=path_text, name=name, size=len(value))
