"""Structured logging helpers — JSON outcome entries with correlation context."""

from __future__ import annotations

import json
import logging
from typing import Any

from .correlation import get_correlation_id

_log = logging.getLogger("xcdp.observability")


class CorrelationIdFilter(logging.Filter):
    """Stamps ``record.correlation_id`` so formatters can reference it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "-"
        return True


def emit_outcome(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    duration_ms: float,
    **fields: Any,
) -> None:
    """Log one JSON entry describing how *operation* ended.

    Never raises; a failure to build the entry is logged at DEBUG and dropped.
    """
    try:
        entry: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "duration_ms": round(duration_ms, 2),
            "correlation_id": get_correlation_id(),
        }
        entry.update(fields)
        logger.info(json.dumps(entry, default=str))
    except Exception:  # noqa: BLE001
        _log.debug("Failed to emit structured log entry", exc_info=True)
