"""Ingestion: the ``save_event_data`` orchestration."""

from __future__ import annotations

from .handler import IngestionHandler, IngestionResult

__all__ = [
    "IngestionHandler",
    "IngestionResult",
]
