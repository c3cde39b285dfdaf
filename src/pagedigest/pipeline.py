"""
Digest pipeline: HTML page -> main content -> summary.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import structlog

from .config.config import Config
from .exceptions import NoContentError
from .extractor.content_extractor import ContentExtractor, Document
from .extractor.models import ExtractResult
from .observability.metrics import increment, time_stage
from .summarizer.extractive import check_sentence_count
from .summarizer.manager import SummarizerManager
from .summarizer.models import SummaryStatus

logger = structlog.get_logger(__name__)


@dataclass(slots=True, frozen=True)
class DigestResult:
    """Extracted page text and its summary."""

    url: str | None
    text: str
    summary: str
    provider: str
    rule: str | None
    fallback: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DigestPipeline:
    """Runs extraction and summarization in sequence for one page at a time."""

    def __init__(
        self,
        config: Config | None = None,
        *,
        extractor: Optional[ContentExtractor] = None,
        summarizers: Optional[SummarizerManager] = None,
    ) -> None:
        self.config = config or Config()
        self.extractor = extractor or ContentExtractor(self.config.extraction)
        self.summarizers = summarizers or SummarizerManager(self.config.summarization)
        self.logger = logger.bind(component="DigestPipeline")

    async def extract(self, document: Document, *, url: str | None = None) -> ExtractResult:
        """Extract main content, raising when the page has no usable text.

        Raises:
            NoContentError: if extraction produced an empty string.
        """
        with time_stage("extract"):
            result = await self.extractor.extract_async(document)

        if result.is_empty:
            increment("extractions_total", outcome="empty")
            self.logger.warning("No meaningful text found", url=url, pruned=result.pruned)
            raise NoContentError(url)

        increment("extractions_total", outcome="fallback" if result.fallback else "rule")
        self.logger.debug(
            "Content extracted",
            url=url,
            rule=result.rule,
            fallback=result.fallback,
            pruned=result.pruned,
            text_length=len(result.text),
        )
        return result

    async def digest(
        self,
        document: Document,
        *,
        url: str | None = None,
        sentence_count: int | None = None,
        provider: str | None = None,
    ) -> DigestResult:
        """
        Extract a page's main content and summarize it.

        Args:
            document: Raw HTML or a parsed BeautifulSoup tree
            url: Optional source URL, used for logging only
            sentence_count: Summary length, defaults to the configured count
            provider: Summarization backend, defaults to the configured provider

        Returns:
            DigestResult with the extracted text and the summary

        Raises:
            NoContentError: if the page has no usable text
            InvalidArgumentError: if ``sentence_count`` is below 1
            UnknownProviderError: if ``provider`` is not registered
        """
        # argument errors surface before any parsing
        if sentence_count is not None:
            check_sentence_count(sentence_count)
        backend = self.summarizers.get(provider)
        extraction = await self.extract(document, url=url)

        with time_stage("summarize"):
            summary = await self.summarizers.summarize(extraction.text, sentence_count, provider=backend.name)
        status = SummaryStatus.of(summary)
        increment("summaries_total", provider=backend.name, status=status.value)

        self.logger.info(
            "Page digested",
            url=url,
            rule=extraction.rule,
            fallback=extraction.fallback,
            text_length=len(extraction.text),
            provider=backend.name,
            status=status.value,
        )
        return DigestResult(
            url=url,
            text=extraction.text,
            summary=summary,
            provider=backend.name,
            rule=extraction.rule,
            fallback=extraction.fallback,
        )
