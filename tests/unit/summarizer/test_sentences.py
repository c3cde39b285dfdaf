"""Unit tests for sentence segmentation and tokenization."""

from __future__ import annotations

from pagedigest.summarizer.sentences import collapse_whitespace, sentence_runs, split_sentences, tokenize


class TestCollapseWhitespace:
    def test_collapses_all_whitespace(self):
        assert collapse_whitespace("  one\n\n two\t three  ") == "one two three"


class TestSplitSentences:
    def test_splits_on_terminators(self):
        assert split_sentences("Hello world! How are you? Fine.") == ["Hello world!", "How are you?", "Fine."]

    def test_terminator_runs_stay_with_their_sentence(self):
        assert split_sentences("Wait... what?! Really?!?") == ["Wait...", "what?!", "Really?!?"]

    def test_trailing_text_without_terminator_is_dropped(self):
        assert split_sentences("Complete sentence. trailing fragment") == ["Complete sentence."]

    def test_no_terminator(self):
        assert split_sentences("no terminator at all") == []

    def test_empty(self):
        assert split_sentences("") == []

    def test_raw_runs_keep_leading_space(self):
        assert sentence_runs("One. Two! three") == ["One.", " Two!"]


class TestTokenize:
    def test_lowercases_and_splits_on_non_word_characters(self):
        assert tokenize("Don't stop-me NOW, ok?") == ["don", "t", "stop", "me", "now", "ok"]

    def test_keeps_accented_words_whole(self):
        assert tokenize("Être ou ne pas être.") == ["être", "ou", "ne", "pas", "être"]

    def test_punctuation_only(self):
        assert tokenize("...!?") == []
