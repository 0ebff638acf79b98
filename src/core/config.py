"""Runtime configuration model for glusterxattr.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from core.constants import (
    DEFAULT_ATTRIBUTE_NAMESPACE,
    DEFAULT_LOG_LEVEL,
    FOLLOW_SYMLINKS_ENV_VAR,
    LEGACY_STIME_NAMES_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    NAMESPACE_ENV_VAR,
    SUPPORTED_ATTRIBUTE_NAMESPACES,
)
from core.errors import GlusterXattrConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class GlusterXattrConfig:
    """Validated runtime configuration.

    Attributes:
        namespace: Attribute namespace prefix, ``trusted`` or ``user``.
        legacy_stime_names: Address stime through the legacy
            ``<stime name>.xtime`` attribute instead of the documented one.
        follow_symlinks: Whether attribute calls dereference symlinks.
        log_level: Minimum log level name for library events.
    """

    namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE
    legacy_stime_names: bool = False
    follow_symlinks: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "GlusterXattrConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            GlusterXattrConfigError: If environment values are invalid.
        """
        namespace = os.getenv(NAMESPACE_ENV_VAR, DEFAULT_ATTRIBUTE_NAMESPACE)
        legacy_value = os.getenv(LEGACY_STIME_NAMES_ENV_VAR, "false")
        follow_value = os.getenv(FOLLOW_SYMLINKS_ENV_VAR, "true")
        log_level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(
            namespace=_parse_namespace(namespace),
            legacy_stime_names=_parse_bool(legacy_value, LEGACY_STIME_NAMES_ENV_VAR),
            follow_symlinks=_parse_bool(follow_value, FOLLOW_SYMLINKS_ENV_VAR),
            log_level=_parse_log_level(log_level),
        )


def _parse_namespace(raw_value: str) -> str:
    """Validate the attribute namespace value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Lowercase namespace name.

    Raises:
        GlusterXattrConfigError: If the namespace is not supported.
    """
    namespace = raw_value.strip().lower()
    if namespace not in SUPPORTED_ATTRIBUTE_NAMESPACES:
        raise GlusterXattrConfigError(
            f"Invalid {NAMESPACE_ENV_VAR} value: "
            f"expected one of {', '.join(SUPPORTED_ATTRIBUTE_NAMESPACES)}, got '{raw_value}'. "
            "Use 'user' for unprivileged testing."
        )
    return namespace


def _parse_bool(raw_value: str, env_var: str) -> bool:
    """Parse a boolean environment value.

    Args:
        raw_value: Raw string from environment.
        env_var: Variable name used in error messages.

    Returns:
        Parsed boolean.

    Raises:
        GlusterXattrConfigError: If value is not a boolean literal.
    """
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise GlusterXattrConfigError(
        f"Invalid {env_var} value: expected true or false, got '{raw_value}'."
    )


def _parse_log_level(raw_value: str) -> str:
    level_name = raw_value.strip().upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise GlusterXattrConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: '{raw_value}'. "
            "Set it to DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )
    return level_name
