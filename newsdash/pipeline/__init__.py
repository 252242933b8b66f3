"""Ingestion batch and retention jobs."""

from .orchestrator import BatchOrchestrator
from .retention import RetentionSweeper, SweepResult

__all__ = ["BatchOrchestrator", "RetentionSweeper", "SweepResult"]
