"""
Frequency-based extractive summarizer.

Scores each sentence by the global frequency of the top keywords it
contains, adds positional bonuses for the opening and closing sentences,
penalizes fragment-length sentences, then keeps the best sentences in their
original order.
"""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from typing import AbstractSet, List, Sequence

import structlog

from ..config.config import SummarizationSettings
from ..exceptions import InvalidArgumentError
from .models import Sentence, Summary, SummaryStatus
from .sentences import collapse_whitespace, sentence_runs, tokenize
from .stopwords import STOP_WORDS

logger = structlog.get_logger(__name__)


def check_sentence_count(sentence_count: int) -> int:
    """Validate a requested summary length.

    Raises:
        InvalidArgumentError: if ``sentence_count`` is not an integer of at least 1.
    """
    if isinstance(sentence_count, bool) or not isinstance(sentence_count, int):
        raise InvalidArgumentError(f"sentence_count must be an integer, got {type(sentence_count).__name__}")
    if sentence_count < 1:
        raise InvalidArgumentError(f"sentence_count must be at least 1, got {sentence_count}")
    return sentence_count


class ExtractiveSummarizer:
    """Classic keyword-frequency summarizer. Stateless and safe to share between threads."""

    def __init__(
        self,
        settings: SummarizationSettings | None = None,
        stop_words: AbstractSet[str] | None = None,
    ) -> None:
        self.settings = settings or SummarizationSettings()
        self.stop_words = STOP_WORDS if stop_words is None else frozenset(stop_words)

    def keyword_frequencies(self, sentences: Sequence[str]) -> Counter[str]:
        """Count keyword candidates across all sentences, in first-seen order."""
        frequencies: Counter[str] = Counter()
        min_length = self.settings.min_token_length
        for sentence in sentences:
            for token in tokenize(sentence):
                if len(token) >= min_length and token not in self.stop_words:
                    frequencies[token] += 1
        return frequencies

    def top_keywords(self, frequencies: Counter[str]) -> List[str]:
        # most_common keeps insertion order among equal counts
        return [word for word, _ in frequencies.most_common(self.settings.keyword_count)]

    def score_sentence(
        self,
        sentence: str,
        index: int,
        total: int,
        keywords: Sequence[str],
        frequencies: Counter[str],
    ) -> float:
        """Score one raw sentence run. The result may be negative and is never clamped.

        The short-sentence length check counts the run as matched, leading space included.
        """
        settings = self.settings
        lowered = sentence.lower()

        # each keyword counts once per sentence, weighted by its global frequency
        score = float(sum(frequencies[keyword] for keyword in keywords if keyword in lowered))

        if index == 0 or index == total - 1:
            score += settings.edge_bonus
        elif index < total * settings.edge_fraction or index > total * (1 - settings.edge_fraction):
            score += settings.near_edge_bonus

        if len(sentence) < settings.short_sentence_length:
            score -= settings.short_sentence_penalty
        return score

    def run(self, text: str, sentence_count: int) -> Summary:
        """Summarize ``text`` into at most ``sentence_count`` sentences.

        Degenerate inputs produce a sentinel ``Summary`` rather than an error.

        Raises:
            InvalidArgumentError: if ``sentence_count`` is not a positive integer.
        """
        check_sentence_count(sentence_count)

        if not text or not text.strip():
            return Summary.sentinel(SummaryStatus.EMPTY_INPUT)

        runs = sentence_runs(collapse_whitespace(text))
        if not runs:
            return Summary.sentinel(SummaryStatus.NO_SENTENCES)

        frequencies = self.keyword_frequencies(runs)
        keywords = self.top_keywords(frequencies)
        total = len(runs)
        # score the raw run (leading space included), show the trimmed text
        scored = [
            Sentence(
                text=run.strip(),
                index=index,
                score=self.score_sentence(run, index, total, keywords, frequencies),
            )
            for index, run in enumerate(runs)
        ]

        # sorted() is stable, so equal scores keep source order
        selected = sorted(scored, key=lambda s: -s.score)[:sentence_count]
        ordered = tuple(sorted(selected, key=lambda s: s.index))
        summary_text = " ".join(s.text for s in ordered).strip()

        logger.debug(
            "Summarized text",
            sentences=total,
            selected=len(ordered),
            keywords=keywords,
        )
        if not summary_text:
            return Summary.sentinel(SummaryStatus.NO_RELEVANT_SUMMARY)
        return Summary(status=SummaryStatus.OK, sentences=ordered, text=summary_text)

    def summarize(self, text: str, sentence_count: int) -> str:
        return self.run(text, sentence_count).text


@lru_cache(maxsize=1)
def _default_summarizer() -> ExtractiveSummarizer:
    return ExtractiveSummarizer()


def summarize(text: str, sentence_count: int = 5) -> str:
    """Return an extractive summary of ``text``, or a fixed sentinel message for degenerate input."""
    return _default_summarizer().summarize(text, sentence_count)
