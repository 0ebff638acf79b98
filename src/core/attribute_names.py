"""Extended attribute name construction.

Names are dot-joined from fixed prefixes and caller-supplied volume
identifiers. Identifier components are neither validated nor escaped:
a malformed identifier yields a name that simply does not exist.
"""

from __future__ import annotations

from core.constants import (
    DEFAULT_ATTRIBUTE_NAMESPACE,
    GFID_ATTRIBUTE_SUFFIX,
    GLUSTERFS_ATTRIBUTE_PREFIX,
    STIME_ATTRIBUTE_SUFFIX,
    VOLUME_ID_ATTRIBUTE_SUFFIX,
    XTIME_ATTRIBUTE_SUFFIX,
)


def gfid_name(namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE) -> str:
    """Return the brick GFID attribute name, ``trusted.gfid`` by default."""
    return f"{namespace}.{GFID_ATTRIBUTE_SUFFIX}"


def volume_id_name(namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE) -> str:
    """Return the volume id attribute name, ``trusted.glusterfs.volume-id`` by default."""
    return f"{namespace}.{GLUSTERFS_ATTRIBUTE_PREFIX}.{VOLUME_ID_ATTRIBUTE_SUFFIX}"


def xtime_name(volume_id: str, namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE) -> str:
    """Build the xtime attribute name for a master volume.

    Args:
        volume_id: Master volume UUID text.
        namespace: Attribute namespace prefix.

    Returns:
        ``<namespace>.glusterfs.<volume_id>.xtime``.
    """
    return f"{namespace}.{GLUSTERFS_ATTRIBUTE_PREFIX}.{volume_id}.{XTIME_ATTRIBUTE_SUFFIX}"


def stime_name(
    master_id: str,
    slave_id: str,
    namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE,
) -> str:
    """Build the stime attribute name for a master/slave volume pair.

    Args:
        master_id: Master volume UUID text.
        slave_id: Slave volume UUID text.
        namespace: Attribute namespace prefix.

    Returns:
        ``<namespace>.glusterfs.<master_id>.<slave_id>.stime``.
    """
    return (
        f"{namespace}.{GLUSTERFS_ATTRIBUTE_PREFIX}."
        f"{master_id}.{slave_id}.{STIME_ATTRIBUTE_SUFFIX}"
    )


def legacy_stime_name(
    master_id: str,
    slave_id: str,
    namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE,
) -> str:
    """Build the stime name written by older geo-replication tooling.

    Older tooling passed the complete stime name through the xtime
    builder, so the stored name carries the prefix twice and an
    ``.xtime`` suffix.
    """
    return xtime_name(stime_name(master_id, slave_id, namespace), namespace)
