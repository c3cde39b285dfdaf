"""
SummarizerManager: named registry of summarization backends.

Only the local "classic" backend ships with pagedigest; remote model
backends can be registered under their own names as long as they follow the
``Summarizer`` protocol.
"""

from __future__ import annotations

import asyncio
import time
from typing import Dict, Iterable, List, Optional

import structlog

from ..config.config import SummarizationSettings
from ..exceptions import UnknownProviderError
from .extractive import ExtractiveSummarizer, check_sentence_count
from .protocols import Summarizer

logger = structlog.get_logger(__name__)


class ClassicSummarizer:
    """Local backend running the extractive algorithm in a worker thread."""

    name = "classic"

    def __init__(self, settings: SummarizationSettings | None = None) -> None:
        self.engine = ExtractiveSummarizer(settings)

    async def summarize(self, text: str, sentence_count: int) -> str:
        # pure CPU work, run in the default thread pool
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.engine.summarize, text, sentence_count)


class SummarizerManager:
    """
    Dispatches summarization requests to a named backend.

    Features:
    - Default provider taken from settings
    - Validation of provider names and sentence counts before dispatch
    - Per-backend call metrics
    """

    def __init__(
        self,
        settings: SummarizationSettings | None = None,
        backends: Optional[Iterable[Summarizer]] = None,
    ) -> None:
        """
        Initialize the SummarizerManager.

        Args:
            settings: Summarization settings; the default provider and the
                classic backend's tuning come from here
            backends: Backends to register instead of the classic one
        """
        self.settings = settings or SummarizationSettings()
        self.logger = logger.bind(component="SummarizerManager")
        self._backends: Dict[str, Summarizer] = {}
        self._metrics: Dict[str, Dict[str, float]] = {}

        for backend in backends if backends is not None else [ClassicSummarizer(self.settings)]:
            self.register(backend)

        # Fail early when the configured default is missing
        self.get(self.settings.provider)

    def register(self, backend: Summarizer) -> None:
        """Register ``backend`` under its name, replacing any backend of the same name."""
        if not isinstance(backend, Summarizer):
            raise TypeError(f"{type(backend).__name__} does not implement the Summarizer protocol")
        name = backend.name.lower()
        self._backends[name] = backend
        self._metrics.setdefault(name, {"calls": 0, "failures": 0, "total_time": 0.0})

    @property
    def providers(self) -> List[str]:
        return list(self._backends)

    def get(self, provider: str | None = None) -> Summarizer:
        name = (provider or self.settings.provider).lower()
        try:
            return self._backends[name]
        except KeyError:
            raise UnknownProviderError(
                f"Unknown summarization provider '{name}'. Available providers: {self.providers}"
            ) from None

    async def summarize(
        self,
        text: str,
        sentence_count: int | None = None,
        *,
        provider: str | None = None,
    ) -> str:
        """
        Summarize text with the selected backend.

        Args:
            text: Plain text to summarize
            sentence_count: Summary length, defaults to the configured count
            provider: Backend name, defaults to the configured provider

        Returns:
            Summary text or a sentinel message
        """
        count = check_sentence_count(
            self.settings.default_sentence_count if sentence_count is None else sentence_count
        )
        backend = self.get(provider)
        metrics = self._metrics[backend.name.lower()]

        start_time = time.perf_counter()
        metrics["calls"] += 1
        try:
            summary = await backend.summarize(text, count)
        except Exception as e:
            metrics["failures"] += 1
            self.logger.error(
                "Summarizer failed",
                provider=backend.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
        finally:
            metrics["total_time"] += time.perf_counter() - start_time

        self.logger.debug(
            "Summary produced",
            provider=backend.name,
            sentence_count=count,
            text_length=len(text),
            summary_length=len(summary),
        )
        return summary

    def get_metrics(self) -> Dict[str, Dict[str, float]]:
        """
        Get per-backend call metrics.

        Returns:
            Dictionary of metrics per provider
        """
        metrics = {}
        for name, raw in self._metrics.items():
            calls = raw["calls"]
            metrics[name] = {
                "calls": calls,
                "failures": raw["failures"],
                "failure_rate": raw["failures"] / calls if calls > 0 else 0.0,
                "total_time": raw["total_time"],
                "avg_time": raw["total_time"] / calls if calls > 0 else 0.0,
            }
        return metrics
