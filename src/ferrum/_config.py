"""Library configuration: FerrumConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from ferrum._logging import configure_logging

__all__ = [
    'FerrumConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class FerrumConfig:
    """Configuration for ferrum.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when logging is configured, else console output.
        strict_match: Raise when ``match`` receives a value that is neither an
            Option nor a Result and no ``_`` handler is given.
    """

    log_level: str | None = None
    json_logs: bool = True
    strict_match: bool = True


# Global configuration (set by init())
_config: FerrumConfig | None = None


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable; None when unset or unrecognized."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return None
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logging.warning("Unknown %s value '%s', ignoring", name, raw)
    return None


def _resolve_flag(value: bool | None, env_name: str, default: bool) -> bool:
    if value is not None:
        return value
    from_env = _env_flag(env_name)
    return default if from_env is None else from_env


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    strict_match: bool | None = None,
) -> FerrumConfig:
    """Initialize ferrum with the given configuration.

    Every argument left as None is read from the environment
    (``FERRUM_LOG_LEVEL``, ``FERRUM_JSON_LOGS``, ``FERRUM_STRICT_MATCH``) and
    otherwise falls back to the FerrumConfig default.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs instead of console output.
        strict_match: Whether ``match`` rejects non-container values.

    Returns:
        The FerrumConfig that was set.

    Example:
        ```python
        import ferrum

        ferrum.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        log_level = os.environ.get('FERRUM_LOG_LEVEL') or None

    _config = FerrumConfig(
        log_level=log_level,
        json_logs=_resolve_flag(json_logs, 'FERRUM_JSON_LOGS', default=True),
        strict_match=_resolve_flag(strict_match, 'FERRUM_STRICT_MATCH', default=True),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> FerrumConfig:
    """Get the current configuration.

    Returns the defaults when init() has not been called.
    """
    if _config is None:
        return FerrumConfig()
    return _config


def reset_config() -> None:
    """Forget any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
