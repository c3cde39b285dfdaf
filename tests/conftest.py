"""
Shared test configuration for pagedigest.

Provides HTML and text fixtures representative of real pages: chrome around
an article, boilerplate widgets, and short or degenerate documents.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

ARTICLE_PARAGRAPHS = [
    "Solar power capacity grew faster than any other energy source last year, according to a new industry report.",
    "The report found that falling panel prices and cheaper storage made solar projects viable in regions "
    "that had long relied on coal and gas.",
    "Analysts warned that grid connections remain the main bottleneck, with many finished projects waiting "
    "months before they can deliver power.",
    "Governments are now under pressure to invest in transmission lines so that new solar capacity is not wasted.",
]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


@pytest.fixture
def article_text() -> str:
    return " ".join(ARTICLE_PARAGRAPHS)


@pytest.fixture
def article_html() -> str:
    """A news page: header, navigation, sidebar ads, a script and the article itself."""
    paragraphs = "\n".join(f"      <p>{p}</p>" for p in ARTICLE_PARAGRAPHS)
    return f"""<!DOCTYPE html>
<html>
  <head><title>Solar report</title><style>body {{ color: red; }}</style></head>
  <body>
    <header><h1>Daily Energy News</h1></header>
    <nav><a href="/">Home</a> <a href="/world">World</a> <a href="/markets">Markets</a></nav>
    <div class="sidebar">Trending: ten gadgets you must buy now</div>
    <div class="ad">Advertisement: subscribe for unlimited access</div>
    <article>
      <h2>Solar power surges</h2>
{paragraphs}
      <div class="share-buttons"><button>Share</button> Share this story</div>
    </article>
    <script>trackPageView("solar");</script>
    <footer>Copyright Daily Energy News</footer>
  </body>
</html>
"""


@pytest.fixture
def article_soup(article_html: str) -> BeautifulSoup:
    return BeautifulSoup(article_html, "html.parser")

