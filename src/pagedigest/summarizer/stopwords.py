"""Stop-word lists for keyword scoring. Deliberately short; only the most common function words."""

from __future__ import annotations

FRENCH_STOP_WORDS = frozenset(
    {
        "le", "la", "les", "un", "une", "des", "de", "du",
        "à", "au", "aux", "ce", "cet", "cette", "ces", "en", "dans", "sur", "pour", "avec", "sans",
        "et", "ou", "ni", "mais", "donc", "or", "car", "que", "qui", "quoi", "où", "quand", "comment",
        "est", "sont", "être", "avoir", "il", "elle", "ils", "elles", "je", "tu", "nous", "vous",
        "mon", "ma", "mes", "ton", "ta", "tes", "son", "sa", "ses", "notre", "nos", "votre", "vos",
        "leur", "leurs",
    }
)  # fmt: skip

ENGLISH_STOP_WORDS = frozenset(
    {
        "a", "an", "the", "is", "am", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "but", "or", "nor", "and", "yet", "so", "for", "on", "at", "by", "of", "from",
        "in", "to", "with", "without", "this", "that", "these", "those", "he", "she", "it", "they", "i",
        "you", "my", "your", "his", "her", "its", "our", "their", "me", "him", "us", "them",
    }
)  # fmt: skip

STOP_WORDS = FRENCH_STOP_WORDS | ENGLISH_STOP_WORDS
