"""Library configuration: StructConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_struct._logging import configure_logging

__all__ = [
    'StructConfig',
    'get_config',
    'init',
    'logging_enabled',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class StructConfig:
    """Configuration for klaw-struct.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Active configuration (set by init(), lazily on first get_config())
_config: StructConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_STRUCT_LOG_LEVEL; unset or empty means silent."""
    level = os.environ.get('KLAW_STRUCT_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read KLAW_STRUCT_LOG_JSON, defaulting to JSON output."""
    value = os.environ.get('KLAW_STRUCT_LOG_JSON', '').strip().lower()
    if not value or value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logging.warning("Unknown KLAW_STRUCT_LOG_JSON value '%s', defaulting to JSON", value)
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> StructConfig:
    """Initialize klaw-struct with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; still None there means silent.
        json_output: JSON or console rendering. Read from the environment if None.

    Returns:
        The StructConfig that was set.

    Example:
        ```python
        from klaw_struct import init

        # Environment driven
        init()

        # Show defaulted fields and parse failures
        init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = StructConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> StructConfig:
    """Get the active configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def logging_enabled() -> bool:
    """Return True if library events should be logged."""
    return get_config().log_level is not None
