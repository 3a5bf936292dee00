"""Structured logging setup using structlog.

persistkit itself only ever asks for loggers (:func:`get_logger`) and emits
snake_case events such as ``cache_set`` or ``storage_list_failed``.  Hosts
that want those events rendered call :func:`configure_logging` once at
startup.

Rendering follows the library settings: ``Settings.log_level`` sets the
threshold and ``Settings.env == "production"`` (``PERSISTKIT_ENV``) switches
from the coloured console renderer to JSON lines.  Both come from
``get_settings()`` unless a ``Settings`` instance, e.g. one built by
``load_settings("persistkit.yaml")``, is passed in.  Standard-library
``logging`` is routed through the same processor chain.
"""

from __future__ import annotations

import logging
import sys

import structlog

from persistkit.config.settings import Settings, get_settings


def _shared_processors() -> list[structlog.types.Processor]:
    # contextvars first so bound request context reaches every event.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(use_json: bool) -> structlog.types.Processor:
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(
    log_level: str | None = None,
    json_output: bool = False,
    settings: Settings | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger for persistkit events.

    Parameters
    ----------
    log_level:
        Threshold such as ``"DEBUG"`` or ``"WARNING"``.  Defaults to
        ``settings.log_level``.
    json_output:
        Force JSON rendering.  Otherwise JSON is used only when
        ``settings.env`` is ``"production"``.
    settings:
        Source of the defaults.  Defaults to :func:`get_settings`.

    Returns
    -------
    structlog.BoundLogger
        A logger bound to the new configuration.
    """
    settings = settings or get_settings()
    level_name = (log_level or settings.log_level).upper()
    level = logging.getLevelName(level_name)
    use_json = json_output or settings.env == "production"

    shared = _shared_processors()
    renderer = _renderer(use_json)

    structlog.configure(
        processors=[*shared, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level_name)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with *name*.

    Never configures logging; a library must leave that to its host.
    """
    return structlog.get_logger(logger_name=name)
