"""
Opt-in structlog setup for applications and scripts that use please-config.

Library modules only call ``structlog.get_logger(__name__)``. Nothing is
configured on import, so an embedding bot keeps its own pipeline unless it
calls ``configure_logging``.
"""

import logging

import structlog

from please_config import __version__
from please_config.exceptions import ConfigurationError
from please_config.settings import LoaderSettings, get_settings


def resolve_log_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name!r}")
    return level


def _add_library_version(_logger: object, _method: str, event_dict: dict) -> dict:
    event_dict.setdefault("please_config_version", __version__)
    return event_dict


def configure_logging(settings: LoaderSettings | None = None) -> None:
    """Configure structlog from the ``PLEASE_CONFIG_LOG_*`` settings.

    Events are rendered as JSON lines, or with structlog's console renderer
    when ``log_json`` is off. Every event carries ``please_config_version``.

    Args:
        settings: Loader settings; read from the environment if omitted
    """
    settings = settings or get_settings()
    renderer = structlog.processors.JSONRenderer() if settings.log_json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_library_version,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
