"""structlog setup for applications embedding hookdispatch."""

import logging

import structlog

from hookdispatch.config import LOG_LEVELS, Settings, get_settings
from hookdispatch.exceptions import InvalidConfigurationError


def configure_logging(
    settings: Settings | None = None,
    level: str | None = None,
    json: bool = False,
) -> None:
    """Configure structlog for the host process.

    The library never calls this itself; it only emits events through
    ``structlog.get_logger()``. Hosts call it once at startup.

    Args:
        settings: Settings to read the level from (defaults to get_settings())
        level: Explicit level name, overriding settings
        json: Render JSON lines instead of the console renderer

    Without an explicit level, settings.debug selects DEBUG and otherwise
    settings.log_level applies.
    """
    if settings is None:
        settings = get_settings()
    if level is not None:
        level_name = level.upper()
    elif settings.debug:
        level_name = "DEBUG"
    else:
        level_name = settings.log_level.upper()
    if level_name not in LOG_LEVELS:
        raise InvalidConfigurationError(
            "log_level", level_name, reason=f"expected one of {', '.join(LOG_LEVELS)}"
        )

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=False,
    )
