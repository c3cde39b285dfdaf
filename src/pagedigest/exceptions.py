"""
Error types raised by pagedigest.

Degenerate *content* (empty pages, text without sentences) is never an
exception: the extractor returns an empty string and the summarizer returns a
``SummaryStatus`` sentinel. The errors below signal contract violations and
host-level decisions.
"""

from __future__ import annotations


class PageDigestError(Exception):
    """Base class for all pagedigest errors."""


class InvalidArgumentError(PageDigestError, ValueError):
    """Raised when a caller passes an out-of-range argument, e.g. a sentence count below 1."""

    pass


class SelectorSyntaxError(PageDigestError, ValueError):
    """Raised when a selector string cannot be parsed into a rule."""

    pass


class UnknownProviderError(PageDigestError, ValueError):
    """Raised when a summarization provider name is not registered."""

    pass


class NoContentError(PageDigestError):
    """Raised by the digest pipeline when a page yields no meaningful text."""

    def __init__(self, url: str | None = None) -> None:
        self.url = url
        message = "No meaningful text found on this page"
        if url:
            message = f"{message}: {url}"
        super().__init__(message)
