"""
pagedigest Content Extraction Module

Finds the article/body text of a noisy HTML document:
1. Isolate: work on a private copy of the document body
2. Prune: drop chrome, scripts, media, forms and class/attribute boilerplate
3. Search: try ranked selector rules, first candidate over the length threshold wins
4. Fallback: use the whole pruned body
5. Normalize: compress whitespace while keeping paragraph breaks
"""

from .content_extractor import ContentExtractor, extract_main_content
from .models import ExtractResult
from .rules import (
    AttributeMatcher,
    ClassMatcher,
    PrunePredicate,
    SelectorRule,
    TagMatcher,
    compile_selectors,
    parse_selector,
)
from .text import normalize_text

__all__ = [
    "ContentExtractor",
    "extract_main_content",
    "ExtractResult",
    "TagMatcher",
    "ClassMatcher",
    "AttributeMatcher",
    "SelectorRule",
    "PrunePredicate",
    "parse_selector",
    "compile_selectors",
    "normalize_text",
]
