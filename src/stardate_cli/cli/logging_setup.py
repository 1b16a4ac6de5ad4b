"""Diagnostic logging for stardate-cli, rendered by structlog.

The CLI stays silent unless asked: the ``stardate_cli`` logger sits at
WARNING, so the quiet config-file fallback never reaches the terminal.
``--verbose`` lowers it to DEBUG and ``--log-json`` swaps the console
renderer for one JSON object per line.  Everything goes to stderr, which
keeps stdout free for conversion results.

Modules log through plain ``logging.getLogger(__name__)``; structlog only
formats the records on their way out.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib log records through structlog to stderr.

    Called once per invocation from :func:`stardate_cli.cli.app.main`;
    any handler installed on the root logger before is replaced.

    Args:
        verbose: Show the ``stardate_cli`` DEBUG records (config fallback,
            effective base year).
        log_json: Render JSON lines instead of human-readable ones.
    """
    app_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
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

    logging.getLogger("stardate_cli").setLevel(app_level)
