"""Logging and metrics for pagedigest."""

from __future__ import annotations

from .logging import configure_logging
from .metrics import METRICS, increment, time_stage

__all__ = ["configure_logging", "METRICS", "increment", "time_stage"]
