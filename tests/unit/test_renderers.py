"""
Unit tests for the HTML and Markdown renderers.
"""

import pytest

from docpreview.blocks import (
    bullet_item,
    link_line,
    paragraph,
    section_header,
    spacer,
    sub_bullet_item,
    title,
)
from docpreview.grammar import GrammarVariant
from docpreview.renderers import (
    DEFAULT_PLACEHOLDER,
    DOC_STYLE_THEME,
    PREVIEWER_THEME,
    HtmlRenderer,
    MarkdownRenderer,
)
from docpreview.transpiler import transpile
from tests.fixtures import SAMPLE_PREVIEWER_NOTES, SAMPLE_DOC_STYLE_REVIEW


class TestHtmlFragment:
    """Tests for HtmlRenderer.render_fragment."""

    def test_title(self, previewer_renderer):
        html = previewer_renderer.render_fragment([title("Weekly Sync")])

        assert html == '<div class="title">Weekly Sync</div>'

    def test_section_header(self, previewer_renderer):
        html = previewer_renderer.render_fragment([section_header("Action Items")])

        assert html == '<div class="section-header">Action Items</div>'

    def test_text_is_escaped(self, previewer_renderer):
        html = previewer_renderer.render_fragment([paragraph("a < b & <script>")])

        assert html == '<div class="text">a &lt; b &amp; &lt;script&gt;</div>'

    def test_bullets(self, previewer_renderer):
        html = previewer_renderer.render_fragment([
            bullet_item("Ship it"),
            sub_bullet_item("+sub item"),
        ])

        assert '<div class="bullet-list bullet-point">Ship it</div>' in html
        assert '<div class="bullet-list bullet-point sub-bullet">+sub item</div>' in html

    def test_link_with_label(self, previewer_renderer):
        block = link_line("Docs: http://example.com", "Docs", "http://example.com")
        html = previewer_renderer.render_fragment([block])

        assert html == '<div class="text">Docs: <span class="link">http://example.com</span></div>'

    def test_link_without_label(self, previewer_renderer):
        block = link_line("see http://example.com", "", "see http://example.com")
        html = previewer_renderer.render_fragment([block])

        assert html == '<div class="text"><span class="link">see http://example.com</span></div>'

    def test_spacer(self, previewer_renderer):
        html = previewer_renderer.render_fragment([spacer()])

        assert html == '<div class="spacer"></div>'

    def test_inline_emphasis(self, doc_style_renderer):
        blocks = transpile("hello **world** end", GrammarVariant.DOC_STYLE)
        html = doc_style_renderer.render_fragment(blocks)

        assert html == '<div class="gdoc-text">hello <span class="gdoc-bold">world</span> end</div>'

    def test_doc_style_headings(self, doc_style_renderer):
        blocks = transpile("## Review\n### Highlights", GrammarVariant.DOC_STYLE)
        html = doc_style_renderer.render_fragment(blocks)

        assert html == (
            '<div class="gdoc-header-l1">Review</div>'
            '<div class="gdoc-header-l2">Highlights</div>'
        )

    def test_empty_blocks_render_placeholder(self, previewer_renderer):
        assert previewer_renderer.render_fragment([], placeholder="No input provided") == "No input provided"

    def test_empty_blocks_without_placeholder(self, previewer_renderer):
        assert previewer_renderer.render_fragment([]) == ""

    def test_theme_follows_grammar(self):
        assert HtmlRenderer(GrammarVariant.PREVIEWER).theme is PREVIEWER_THEME
        assert HtmlRenderer("doc_style").theme is DOC_STYLE_THEME

    @pytest.mark.parametrize("theme", [PREVIEWER_THEME, DOC_STYLE_THEME])
    def test_emphasis_class_is_styled(self, theme):
        assert f".{theme.emphasis_class} {{" in theme.stylesheet


class TestHtmlDocument:
    """Tests for HtmlRenderer.render_document."""

    def test_document_structure(self, previewer_renderer):
        blocks = transpile(SAMPLE_PREVIEWER_NOTES)
        html = previewer_renderer.render_document(blocks, title="Weekly Sync")

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Weekly Sync</title>" in html
        assert "<style>" in html
        assert ".section-header" in html
        assert '<div class="preview-container"><div class="title">Weekly Sync</div>' in html

    def test_doc_style_container(self, doc_style_renderer):
        blocks = transpile(SAMPLE_DOC_STYLE_REVIEW, GrammarVariant.DOC_STYLE)
        html = doc_style_renderer.render_document(blocks)

        assert '<div class="gdoc-container">' in html
        assert ".gdoc-bold" in html
        assert '<span class="gdoc-bold">12%</span>' in html

    def test_empty_document_uses_default_placeholder(self, previewer_renderer):
        html = previewer_renderer.render_document([])

        assert DEFAULT_PLACEHOLDER in html

    def test_page_title_is_escaped(self, previewer_renderer):
        html = previewer_renderer.render_document([title("x")], title="<notes>")

        assert "<title>&lt;notes&gt;</title>" in html


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""

    @pytest.fixture
    def renderer(self):
        return MarkdownRenderer()

    def test_semantic_html_nests_sub_bullets(self, renderer):
        html = renderer.to_semantic_html([
            bullet_item("Ship the release"),
            sub_bullet_item("+ verify the changelog"),
            bullet_item("Update docs"),
        ])

        assert html == (
            "<ul><li>Ship the release<ul><li>verify the changelog</li></ul></li>"
            "<li>Update docs</li></ul>"
        )

    def test_semantic_html_sub_bullet_without_parent(self, renderer):
        html = renderer.to_semantic_html([sub_bullet_item("+orphan")])

        assert html == "<ul><li>orphan</li></ul>"

    def test_semantic_html_skips_spacers(self, renderer):
        html = renderer.to_semantic_html([title("A"), spacer(), paragraph("b")])

        assert html == "<h1>A</h1><p>b</p>"

    def test_render_previewer_notes(self, renderer):
        md_text = renderer.render(transpile(SAMPLE_PREVIEWER_NOTES))

        assert "# Weekly Sync" in md_text
        assert "## Action Items" in md_text
        assert "- Ship the release" in md_text
        assert "verify the changelog" in md_text
        assert "Date: 2025-01-15" in md_text
        assert "https://example.com/docs" in md_text
        assert "\n\n\n" not in md_text
        assert md_text.endswith("\n")

    def test_render_emphasis(self, renderer):
        md_text = renderer.render(transpile("hello **world** end", "doc_style"))

        assert "hello **world** end" in md_text

    def test_render_empty(self, renderer):
        assert renderer.render([]) == ""

    def test_semantic_html_link_wraps_only_url(self, renderer):
        html = renderer.to_semantic_html([
            link_line("see http://example.com now", "", "see http://example.com now"),
        ])

        assert html == '<p>see <a href="http://example.com">http://example.com</a> now</p>'

    def test_semantic_html_labeled_link(self, renderer):
        html = renderer.to_semantic_html([
            link_line("Docs: http://example.com", "Docs", "http://example.com"),
        ])

        assert html == '<p>Docs: <a href="http://example.com">http://example.com</a></p>'

    def test_render_link_without_separator(self, renderer):
        md_text = renderer.render([
            link_line("see http://example.com", "", "see http://example.com"),
        ])

        assert md_text.startswith("see ")
        assert "http://example.com" in md_text
        assert "(see http" not in md_text
        assert "<see http" not in md_text
