"""Structured logging for lingo.

Every lingo logger is a structlog BoundLogger over a stdlib logger named
``lingo.<domain>``. Importing lingo configures nothing: until an application
(or the CLI) calls ``configure_logging``, events go wherever the
application's own stdlib logging setup sends them.
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from lingo import __version__

_LOGGER_PREFIX = "lingo"


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict.setdefault("service", _LOGGER_PREFIX)
    event_dict.setdefault("version", __version__)
    return event_dict


def _pre_chain() -> list[Processor]:
    """Processors that run before rendering, for structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_library_info,
    ]


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Route lingo's events to stderr.

    Args:
        level: Root log level name; unknown names mean WARNING
        json_logs: One JSON object per line instead of console output
    """
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )

    pre_chain = _pre_chain()
    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout is reserved for command output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def bind_context(**kwargs) -> None:
    """Attach ``kwargs`` to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LoggerRegistry:
    """One shared logger per lingo domain."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, domain: str) -> structlog.stdlib.BoundLogger:
        if domain not in cls._loggers:
            cls._loggers[domain] = get_logger(f"{_LOGGER_PREFIX}.{domain}")
        return cls._loggers[domain]


def engine_logger() -> structlog.stdlib.BoundLogger:
    """Logger for inflection decisions."""
    return LoggerRegistry.get("engine")


def registry_logger() -> structlog.stdlib.BoundLogger:
    """Logger for language registration and lookup."""
    return LoggerRegistry.get("languages")


def cli_logger() -> structlog.stdlib.BoundLogger:
    return LoggerRegistry.get("cli")
