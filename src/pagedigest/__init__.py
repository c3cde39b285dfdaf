"""
pagedigest - main-content extraction and classic extractive summarization for web pages.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .extractor import ContentExtractor, extract_main_content
from .pipeline import DigestPipeline, DigestResult
from .summarizer import ExtractiveSummarizer, SummaryStatus, is_sentinel, summarize

__all__ = [
    "__version__",
    "Config",
    "ContentExtractor",
    "extract_main_content",
    "ExtractiveSummarizer",
    "summarize",
    "SummaryStatus",
    "is_sentinel",
    "DigestPipeline",
    "DigestResult",
]
