"""structlog on top of stdlib logging.

stderr gets a console rendering (colour on a TTY) or JSON lines with
``--log-json``. ``--log-file`` adds a JSON-lines copy of every record at
``log/a11yctl-YYYYMMDDHHMMSS.txt`` under the project root. Only the
``a11yctl`` logger tree goes below WARNING, and only with ``--verbose``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

_PRE_CHAIN: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _handler(handler: logging.Handler, renderer: Processor) -> logging.Handler:
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def _reset_root(root: logging.Logger) -> None:
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers.clear()


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    log_file: Path | None = None,
) -> None:
    """Route structlog and stdlib records to stderr and, optionally, a file.

    Safe to call more than once: earlier handlers are replaced, not stacked.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    stderr_renderer: Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    root = logging.getLogger()
    _reset_root(root)
    root.addHandler(_handler(logging.StreamHandler(sys.stderr), stderr_renderer))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        root.addHandler(_handler(file_handler, structlog.processors.JSONRenderer()))
    root.setLevel(logging.WARNING)

    logging.getLogger("a11yctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
