"""
Data models for extractive summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class SummaryStatus(str, Enum):
    """Outcome of a summarization call.

    Every status except ``OK`` is a sentinel: the summary text is a fixed
    message instead of sentences from the input.
    """

    OK = "ok"
    EMPTY_INPUT = "empty_input"
    NO_SENTENCES = "no_sentences"
    NO_RELEVANT_SUMMARY = "no_relevant_summary"

    @property
    def message(self) -> str | None:
        return SENTINEL_MESSAGES.get(self)

    @classmethod
    def of(cls, text: str) -> SummaryStatus:
        """Classify a summary string returned by any backend."""
        for status, message in SENTINEL_MESSAGES.items():
            if text == message:
                return status
        return cls.OK


SENTINEL_MESSAGES = {
    SummaryStatus.EMPTY_INPUT: "Nothing to summarize.",
    SummaryStatus.NO_SENTENCES: "No sentences found to summarize.",
    SummaryStatus.NO_RELEVANT_SUMMARY: "Could not produce a relevant summary with the classic algorithm.",
}


def is_sentinel(text: str) -> bool:
    """True when ``text`` is one of the fixed degenerate-outcome messages."""
    return text in SENTINEL_MESSAGES.values()


@dataclass(slots=True, frozen=True)
class Sentence:
    """A sentence of the source text with its position and score."""

    text: str
    index: int
    score: float = 0.0


@dataclass(slots=True, frozen=True)
class Summary:
    """Selected sentences in source order, plus the text shown to the user."""

    status: SummaryStatus
    sentences: Tuple[Sentence, ...]
    text: str

    @classmethod
    def sentinel(cls, status: SummaryStatus) -> Summary:
        if status is SummaryStatus.OK:
            raise ValueError("OK is not a sentinel status")
        return cls(status=status, sentences=(), text=SENTINEL_MESSAGES[status])

    @property
    def ok(self) -> bool:
        return self.status is SummaryStatus.OK
