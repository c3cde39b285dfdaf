"""
Punctuation-based sentence segmentation and word tokenization.
"""

from __future__ import annotations

import re
from typing import List

_WHITESPACE = re.compile(r"\s+")
# a run of non-terminators closed by one or more of . ! ?
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")
_NON_WORD = re.compile(r"\W+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def sentence_runs(text: str) -> List[str]:
    """Raw sentence matches, including the whitespace that precedes each one.

    Trailing text without a terminator is not a sentence and is dropped.
    """
    return [match.group() for match in _SENTENCE.finditer(text)]


def split_sentences(text: str) -> List[str]:
    """Split text into trimmed sentences in order of appearance."""
    return [run.strip() for run in sentence_runs(text)]


def tokenize(sentence: str) -> List[str]:
    """Lowercase word tokens of a sentence."""
    return [token for token in _NON_WORD.split(sentence.lower()) if token]
