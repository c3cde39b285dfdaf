"""
Protocols for pluggable summarization backends.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Summarizer(Protocol):
    """Pluggable text-to-summary backend."""

    name: str

    async def summarize(self, text: str, sentence_count: int) -> str:
        """Summarize plain text.

        Args:
            text: Plain text to summarize
            sentence_count: Target summary length in sentences

        Returns:
            Summary text, or a sentinel message for degenerate input
        """
        ...
