"""
Unit tests for ContentExtractor.
"""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from pagedigest.config.config import ExtractionSettings
from pagedigest.extractor.content_extractor import ContentExtractor, extract_main_content
from pagedigest.extractor.models import ExtractResult

LONG_SENTENCE = "This paragraph carries enough words to count as real article content for the extractor. "
LONG_TEXT = LONG_SENTENCE * 3  # well over the 200 character threshold


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestContentExtractor:
    """Test cases for ContentExtractor."""

    def test_init(self):
        """Test extractor initialization."""
        extractor = ContentExtractor()
        assert extractor.name == "main_content"
        assert extractor.parser == "html.parser"
        assert [rule.name for rule in extractor.content_rules][:2] == ["article", "main"]
        assert extractor.content_rules[-1].name == "p"

    def test_custom_selectors_keep_paragraph_fallback_last(self):
        settings = ExtractionSettings(content_selectors=["p", "section.story"])
        extractor = ContentExtractor(settings)
        assert [rule.name for rule in extractor.content_rules] == ["section.story", "p"]

    def test_extract_article_page(self, article_soup):
        """The article wins and page chrome never leaks into it."""
        result = ContentExtractor().extract(article_soup)

        assert isinstance(result, ExtractResult)
        assert result.rule == "article"
        assert result.fallback is False
        assert result.text.startswith("Solar power surges\n")
        assert "Solar power capacity grew faster" in result.text
        assert "transmission lines" in result.text
        for boilerplate in ("Daily Energy News", "Markets", "Trending", "Advertisement", "Share", "trackPageView"):
            assert boilerplate not in result.text
        assert result.pruned >= 7

    def test_paragraph_structure_is_kept(self, article_soup):
        text = ContentExtractor().extract(article_soup).text
        lines = text.split("\n")
        assert len(lines) == 5
        assert all(line == line.strip() and line for line in lines)

    def test_short_nav_and_paragraph_falls_back(self):
        """A short page falls through every selector and keeps only non-boilerplate text."""
        html = "<html><body><nav>Home | About | Contact | Sitemap</nav><p>Actual short text.</p></body></html>"
        result = ContentExtractor().extract(_soup(html))

        assert result.text == "Actual short text."
        assert result.rule is None
        assert result.fallback is True
        assert result.pruned == 1

    def test_threshold_is_strict(self):
        """A candidate with exactly 200 characters is not selected on its own."""
        html = f"<body><article>{'a' * 200}</article><div>tail text</div></body>"
        result = ContentExtractor().extract(_soup(html))

        assert result.rule is None
        assert result.fallback is True
        assert result.text == "a" * 200 + "tail text"

    def test_threshold_exceeded(self):
        html = f"<body><article>{'a' * 201}</article><div>tail text</div></body>"
        result = ContentExtractor().extract(_soup(html))

        assert result.rule == "article"
        assert result.text == "a" * 201

    def test_small_article_falls_through_to_next_rule(self):
        html = f"""
        <body>
          <article><p>Photo caption only.</p></article>
          <div class="post-content"><p>{LONG_TEXT}</p></div>
        </body>
        """
        result = ContentExtractor().extract(_soup(html))

        assert result.rule == "div.post-content"
        assert "Photo caption" not in result.text
        assert result.text == LONG_TEXT.strip()

    def test_item_prop_rule(self):
        html = f'<body><div itemprop="articleBody">{LONG_TEXT}</div><div>unrelated</div></body>'
        result = ContentExtractor().extract(_soup(html))

        assert result.rule == 'div[itemprop="articleBody"]'
        assert "unrelated" not in result.text

    def test_paragraph_rule_takes_first_long_paragraph(self):
        html = f"<body><p>short intro</p><div><p>{LONG_TEXT}</p></div><p>{LONG_TEXT}second</p></body>"
        result = ContentExtractor().extract(_soup(html))

        # only the first p in document order is considered by the paragraph rule
        assert result.rule is None
        assert result.fallback is True

    def test_paragraph_rule_wins_when_first_paragraph_is_long(self):
        html = f"<body><p>{LONG_TEXT}</p><div>footer-ish text</div></body>"
        result = ContentExtractor().extract(_soup(html))

        assert result.rule == "p"
        assert result.text == LONG_TEXT.strip()

    def test_boilerplate_inside_candidate_is_pruned(self):
        html = f"""
        <body><main>
          <p>{LONG_TEXT}</p>
          <div class="adsbygoogle">Sponsored offer</div>
          <span aria-hidden="true">ICON</span>
          <div class="hidden">Hidden text</div>
          <form><label>Email</label><input name="email"></form>
          <iframe src="https://example.com/embed">frame</iframe>
        </main></body>
        """
        result = ContentExtractor().extract(_soup(html))

        assert result.rule == "main"
        for leaked in ("Sponsored", "ICON", "Hidden text", "Email", "frame"):
            assert leaked not in result.text

    def test_only_boilerplate_yields_empty_string(self):
        html = "<body><nav>Home About Contact</nav><footer>Copyright</footer><script>var x = 1;</script></body>"
        result = ContentExtractor().extract(_soup(html))

        assert result.text == ""
        assert result.is_empty

    def test_does_not_mutate_input(self, article_soup):
        """Extraction works on a private copy of the tree."""
        before_markup = str(article_soup)
        before_count = len(article_soup.find_all())

        ContentExtractor().extract(article_soup)

        assert str(article_soup) == before_markup
        assert len(article_soup.find_all()) == before_count
        assert article_soup.find("nav") is not None

    def test_extraction_is_repeatable(self, article_soup):
        extractor = ContentExtractor()
        assert extractor.extract(article_soup) == extractor.extract(article_soup)

    def test_accepts_raw_html(self, article_html, article_soup):
        extractor = ContentExtractor()
        assert extractor.extract(article_html).text == extractor.extract(article_soup).text

    def test_accepts_fragment_without_body(self):
        result = ContentExtractor().extract("<nav>Menu</nav><p>Actual short text.</p>")
        assert result.text == "Actual short text."

    def test_accepts_element_root(self, article_soup):
        html_element = article_soup.find("html")
        assert ContentExtractor().extract(html_element).rule == "article"

    @pytest.mark.parametrize("root", [None, 42, object()])
    def test_unsupported_root_returns_empty(self, root):
        result = ContentExtractor().extract(root)
        assert result.text == ""
        assert result.fallback is True

    def test_custom_threshold(self):
        settings = ExtractionSettings(min_candidate_length=5)
        html = "<body><nav>menu</nav><article>Short story.</article><p>other</p></body>"
        result = ContentExtractor(settings).extract(_soup(html))

        assert result.rule == "article"
        assert result.text == "Short story."

    def test_custom_prune_selectors(self):
        settings = ExtractionSettings(prune_selectors=[".byline"])
        html = '<body><nav>Menu</nav><div class="byline">By Someone</div><p>Body.</p></body>'
        result = ContentExtractor(settings).extract(_soup(html))

        # nav is no longer pruned, the byline is
        assert "Menu" in result.text
        assert "By Someone" not in result.text

    @pytest.mark.asyncio
    async def test_extract_async(self, article_html):
        result = await ContentExtractor().extract_async(article_html)
        assert result.rule == "article"


class TestExtractMainContent:
    """Test the module-level convenience function."""

    def test_returns_text(self, article_soup):
        text = extract_main_content(article_soup)
        assert text.startswith("Solar power surges")

    def test_nav_and_short_paragraph_page(self):
        html = "<nav>Home | Blog | Archive | Contact us today</nav><p>Actual short text.</p>"
        assert extract_main_content(_soup(html)) == "Actual short text."

    def test_empty_document(self):
        assert extract_main_content("") == ""
