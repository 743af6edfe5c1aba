"""structlog setup for the pieshop CLI.

Everything goes to stderr so stdout stays parseable. Human mode renders
with ``structlog.dev.ConsoleRenderer``; ``--log-json`` emits one JSON
object per line. Stdlib ``logging`` records are routed through the same
processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Libraries that log their own DEBUG chatter through the root logger
_QUIET_LIBRARIES = ("alembic", "sqlalchemy", "pluggy")


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    context: dict[str, Any] | None = None,
) -> None:
    """Install the stderr handler and structlog configuration.

    Args:
        verbose: DEBUG for ``pieshop.*`` loggers; WARNING otherwise.
        log_json: JSON lines instead of the console renderer.
        context: Key/values bound to every log line of this invocation
            (the CLI binds the visitor session).
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    structlog.contextvars.clear_contextvars()
    if context:
        structlog.contextvars.bind_contextvars(**context)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("pieshop").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
