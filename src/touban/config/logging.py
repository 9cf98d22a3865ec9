"""structlog configuration for touban.

Two output modes, both on stderr so stdout carries only the result:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

Every record carries the ``command`` (create, show, member, assign) bound
for the current invocation, so a log line can be traced to its subcommand
without the token itself ever being logged.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    command: str | None = None,
) -> None:
    """Configure structlog processors and route stdlib logging through them.

    Args:
        verbose: Enable DEBUG-level output for ``touban.*``. Otherwise WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        command: Subcommand name bound into every record for this invocation.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    bind_command(command)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("touban").setLevel(level)


def bind_command(command: str | None) -> None:
    """Reset per-invocation context and tag later records with *command*."""
    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)
