"""
pagedigest Summarization Module

Classic extractive summarization (keyword frequency, position and length
heuristics) behind a pluggable ``Summarizer`` backend protocol.
"""

from .extractive import ExtractiveSummarizer, check_sentence_count, summarize
from .manager import ClassicSummarizer, SummarizerManager
from .models import SENTINEL_MESSAGES, Sentence, Summary, SummaryStatus, is_sentinel
from .protocols import Summarizer
from .sentences import collapse_whitespace, sentence_runs, split_sentences, tokenize
from .stopwords import ENGLISH_STOP_WORDS, FRENCH_STOP_WORDS, STOP_WORDS

__all__ = [
    "ExtractiveSummarizer",
    "summarize",
    "check_sentence_count",
    "ClassicSummarizer",
    "SummarizerManager",
    "Summarizer",
    "Sentence",
    "Summary",
    "SummaryStatus",
    "SENTINEL_MESSAGES",
    "is_sentinel",
    "collapse_whitespace",
    "sentence_runs",
    "split_sentences",
    "tokenize",
    "STOP_WORDS",
    "FRENCH_STOP_WORDS",
    "ENGLISH_STOP_WORDS",
]
