"""Core constants used across glusterxattr modules.

This module centralizes attribute-name prefixes and payload sizes.
Keeping values here avoids magic literals in codec and naming logic.
"""

from __future__ import annotations

DEFAULT_ATTRIBUTE_NAMESPACE = "trusted"
SUPPORTED_ATTRIBUTE_NAMESPACES = ("trusted", "user")
GFID_ATTRIBUTE_SUFFIX = "gfid"
GLUSTERFS_ATTRIBUTE_PREFIX = "glusterfs"
VOLUME_ID_ATTRIBUTE_SUFFIX = "volume-id"
XTIME_ATTRIBUTE_SUFFIX = "xtime"
STIME_ATTRIBUTE_SUFFIX = "stime"
IDENTIFIER_BYTE_LENGTH = 16
TIMESTAMP_FIELD_BYTE_LENGTH = 4
TIMESTAMP_BYTE_LENGTH = 8
TIMESTAMP_FIELD_MAX = 2**32 - 1
NAMESPACE_ENV_VAR = "GLUSTERXATTR_NAMESPACE"
LEGACY_STIME_NAMES_ENV_VAR = "GLUSTERXATTR_LEGACY_STIME_NAMES"
FOLLOW_SYMLINKS_ENV_VAR = "GLUSTERXATTR_FOLLOW_SYMLINKS"
LOG_LEVEL_ENV_VAR = "GLUSTERXATTR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
