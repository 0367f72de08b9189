"""Structured logging for ferrum.

Library loggers wrap standard library loggers under the ``ferrum`` namespace
(``ferrum.bridge``, ``ferrum.sync.once``, ...). The ``ferrum`` logger carries a
NullHandler, so records obey stdlib levels and stay quiet until an
application configures logging. :func:`configure_logging` installs structlog's
ProcessorFormatter on the ``ferrum`` logger, or on the root logger when asked,
so structlog and stdlib records share one output format.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'reset_logging',
]

LOGGER_NAME = 'ferrum'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_installed: tuple[logging.Logger, logging.Handler, int, bool] | None = None


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    import structlog

    return [
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    root: bool = False,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
        root: Install the handler on the root logger instead of ``ferrum``.
            Other handlers on the target logger are left in place.
    """
    global _installed  # noqa: PLW0603
    import structlog

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    _uninstall()
    target = logging.getLogger() if root else logging.getLogger(LOGGER_NAME)
    previous_level, previous_propagate = target.level, target.propagate
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not root:
        target.propagate = False
    _installed = (target, handler, previous_level, previous_propagate)


def _uninstall() -> None:
    global _installed  # noqa: PLW0603

    if _installed is None:
        return
    target, handler, level, propagate = _installed
    target.removeHandler(handler)
    target.setLevel(level)
    target.propagate = propagate
    _installed = None


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging` and reset structlog."""
    import structlog

    _uninstall()
    structlog.reset_defaults()


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    Names outside the ``ferrum`` namespace are placed under it.

    Args:
        name: Logger name. Defaults to ``'ferrum'``.

    Returns:
        A lazily configured structlog logger.
    """
    import structlog

    if not name:
        name = LOGGER_NAME
    elif name != LOGGER_NAME and not name.startswith(f'{LOGGER_NAME}.'):
        name = f'{LOGGER_NAME}.{name}'
    return structlog.wrap_logger(logging.getLogger(name))


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each log entry.

    Hooks receive a copy of the event dict once logging has been configured
    with :func:`configure_logging`.

    Args:
        hook: Callable that receives the log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:
                pass  # Hook failures never break logging
        return event_dict

    return hook_processor
