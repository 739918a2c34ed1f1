"""
Block-to-HTML Renderer

Maps each block onto one fixed wrapper element carrying the theme's class
hook. Text is escaped by BeautifulSoup on output, so input can never inject
markup into the preview.
"""

from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..blocks import Block, BlockKind
from ..grammar import Grammar, GrammarVariant, get_grammar
from .themes import THEMES, Theme


DEFAULT_PLACEHOLDER = "No content to display"


class HtmlRenderer:
    """Renders blocks as an HTML fragment or a standalone page."""

    def __init__(
        self,
        grammar: Union[Grammar, GrammarVariant, str] = GrammarVariant.PREVIEWER,
        theme: Optional[Theme] = None,
    ):
        self.grammar = get_grammar(grammar)
        self.theme = theme or THEMES[self.grammar.variant]

    def render_fragment(self, blocks: list[Block], placeholder: str = "") -> str:
        """
        Render blocks as a sequence of sibling elements.

        Args:
            blocks: Transpiler output.
            placeholder: Text returned (escaped) when there are no blocks.

        Returns:
            The HTML fragment string.
        """
        soup = BeautifulSoup("", "html.parser")
        if not blocks:
            soup.append(placeholder)
            return str(soup)

        for block in blocks:
            soup.append(self._render_block(soup, block))
        return str(soup)

    def render_document(
        self,
        blocks: list[Block],
        title: str = "Preview",
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> str:
        """Render a complete HTML page embedding the theme stylesheet."""
        soup = BeautifulSoup(
            "<!DOCTYPE html><html><head></head><body></body></html>",
            "html.parser",
        )

        meta = soup.new_tag("meta", attrs={"charset": "utf-8"})
        soup.head.append(meta)
        title_tag = soup.new_tag("title")
        title_tag.string = title
        soup.head.append(title_tag)
        style = soup.new_tag("style")
        style.string = self.theme.stylesheet
        soup.head.append(style)

        container = soup.new_tag("div", attrs={"class": self.theme.container_class})
        if blocks:
            for block in blocks:
                container.append(self._render_block(soup, block))
        else:
            container.append(placeholder)
        soup.body.append(container)

        return str(soup) + "\n"

    def _render_block(self, soup: BeautifulSoup, block: Block) -> Tag:
        if block.kind == BlockKind.SPACER:
            return soup.new_tag("div", attrs={"class": self.theme.spacer_class})

        element = soup.new_tag("div", attrs={"class": self.theme.class_for(block.kind)})

        if block.kind == BlockKind.LINK_LINE:
            if block.label:
                element.append(f"{block.label}: ")
            link = soup.new_tag("span", attrs={"class": self.theme.link_class})
            link.string = block.url
            element.append(link)
        elif block.kind == BlockKind.PARAGRAPH and block.has_emphasis:
            for span in block.spans:
                if span.emphasis:
                    bold = soup.new_tag("span", attrs={"class": self.theme.emphasis_class})
                    bold.string = span.text
                    element.append(bold)
                else:
                    element.append(span.text)
        else:
            element.string = block.text

        return element
