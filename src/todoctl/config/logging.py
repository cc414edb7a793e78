"""structlog rendering for todoctl's stdlib loggers.

todoctl modules log through ``logging.getLogger(__name__)`` with a short
event name and the entity fields in ``extra``::

    logger.info("task_created", extra={"task_id": task.id, "owner_id": owner_id})

``configure_logging`` turns those records into structured events on
stderr: ``extra`` fields become top-level keys, and process-wide context
(e.g. the id strategy, bound by ``bootstrap()``) is merged into every event.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog

PACKAGE_LOGGER = "todoctl"


def _base_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _select_renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Route todoctl log events to stderr as structured output.

    Args:
        verbose: Emit todoctl DEBUG events (repository writes and misses,
            skipped ids). Otherwise todoctl logs at WARNING and above.
        log_json: One JSON object per line instead of console output.
        context: Fields bound into every event until the next call.
            Replaces any previously bound context.
    """
    base = _base_processors()

    structlog.configure(
        processors=[*base, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        # ExtraAdder lifts logging ``extra`` fields; it only applies to stdlib records.
        foreign_pre_chain=[*base, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _select_renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if context:
        structlog.contextvars.bind_contextvars(**context)
