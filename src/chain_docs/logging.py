"""
Structured logging for chain documentation generation.

Logging is driven by ``DocSettings``: the level comes from
``settings.log_level`` (``CHAIN_DOCS_LOG_LEVEL``), so debug events such as
``chain_page_rendered`` stay silent unless asked for. The formatter calls
``ensure_logging`` on construction; an application that configures
structlog itself keeps its own setup.

Examples:
    >>> from chain_docs.logging import configure_logging, get_logger
    >>> configure_logging(DocSettings(log_level="DEBUG"), json_format=False)
    >>> with chain_context(solana):
    ...     get_logger(__name__).debug("chain_page_rendered")

Tags:
    logging, structlog, observability, chain-docs
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from chain_docs.settings import DocSettings, get_settings

if TYPE_CHECKING:
    from chain_docs.models import Chain


SERVICE_NAME = "chain-docs"


def _add_service(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so redirected streams are honoured.
    return structlog.PrintLogger(sys.stderr)


def _processors(json_format: bool) -> list[Processor]:
    """Processor chain: context, timestamp, level, service, renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        _add_service,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_logging(
    settings: DocSettings | None = None,
    json_format: bool | None = None,
) -> None:
    """Configure structlog from settings.

    Args:
        settings: Source of ``log_level`` (default settings if omitted)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if json_format is None:
        json_format = not sys.stderr.isatty()

    structlog.configure(
        processors=_processors(json_format),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def ensure_logging(settings: DocSettings | None = None) -> None:
    """Configure logging from settings unless structlog is already configured."""
    if not structlog.is_configured():
        configure_logging(settings)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(logger=name)


@contextmanager
def chain_context(chain: "Chain") -> Iterator[None]:
    """Bind the chain being rendered to every log event in the block."""
    with structlog.contextvars.bound_contextvars(chain=chain.name, chain_id=chain.id):
        yield


__all__ = [
    "SERVICE_NAME",
    "configure_logging",
    "ensure_logging",
    "get_logger",
    "chain_context",
]
