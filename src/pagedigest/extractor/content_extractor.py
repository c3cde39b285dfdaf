"""
BeautifulSoup-based main-content extractor.

Works on an isolated copy of the document: boilerplate subtrees are pruned
first, then candidate selectors are tried in priority order, and the whole
pruned body is used when no candidate carries enough text.
"""

from __future__ import annotations

import asyncio
import copy
from functools import lru_cache
from typing import Union

import structlog
from bs4 import BeautifulSoup, Tag

from ..config.config import ExtractionSettings
from .models import ExtractResult
from .rules import PrunePredicate, compile_selectors
from .text import normalize_text

logger = structlog.get_logger(__name__)

Document = Union[Tag, str]


class ContentExtractor:
    """Heuristic main-content extractor over a BeautifulSoup tree."""

    name = "main_content"

    def __init__(self, settings: ExtractionSettings | None = None) -> None:
        self.settings = settings or ExtractionSettings()
        self.parser = "html.parser"
        self.content_rules = compile_selectors(self.settings.content_selectors)
        self.prune_predicate = PrunePredicate(compile_selectors(self.settings.prune_selectors))
        self.logger = logger.bind(component="ContentExtractor")

    def _isolate(self, root: Document) -> Tag | None:
        """Return a private copy of the document body that is safe to mutate."""
        if isinstance(root, str):
            # a freshly parsed tree is already private
            soup = BeautifulSoup(root, self.parser)
            return soup.body or soup
        if not isinstance(root, Tag):
            return None
        body = root if root.name == "body" else root.find("body")
        # copy.copy on a bs4 Tag copies the whole subtree
        return copy.copy(body if body is not None else root)

    def extract(self, root: Document) -> ExtractResult:
        """Extract the main content text from a document.

        Args:
            root: A parsed document or element, or raw HTML.

        Returns:
            ExtractResult whose text is empty when nothing usable was found.
        """
        document = self._isolate(root)
        if document is None:
            self.logger.debug("Unsupported document root", root_type=type(root).__name__)
            return ExtractResult(text="", rule=None, fallback=True, pruned=0)

        pruned = self.prune_predicate.prune(document)

        threshold = self.settings.min_candidate_length
        for rule in self.content_rules:
            candidate = rule.first_match(document)
            if candidate is None:
                continue
            text = candidate.get_text()
            if len(text) > threshold:
                self.logger.debug("Candidate selected", rule=rule.name, text_length=len(text), pruned=pruned)
                return ExtractResult(text=normalize_text(text), rule=rule.name, fallback=False, pruned=pruned)
            self.logger.debug("Candidate below threshold", rule=rule.name, text_length=len(text), threshold=threshold)

        text = normalize_text(document.get_text())
        self.logger.debug("No candidate met the threshold, using pruned body", text_length=len(text), pruned=pruned)
        return ExtractResult(text=text, rule=None, fallback=True, pruned=pruned)

    async def extract_async(self, root: Document) -> ExtractResult:
        """Run ``extract`` in a worker thread; parsing large pages is CPU-bound."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.extract, root)


@lru_cache(maxsize=1)
def _default_extractor() -> ContentExtractor:
    return ContentExtractor()


def extract_main_content(root: Document) -> str:
    """Return the main content text of ``root``, or an empty string if none was found."""
    return _default_extractor().extract(root).text
