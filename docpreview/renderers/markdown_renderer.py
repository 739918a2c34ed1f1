"""
Block-to-Markdown Renderer

Builds semantic HTML (headings, paragraphs, lists, links, strong text) from
the block sequence and hands it to markdownify, so every grammar exports to
the same normalized Markdown dialect.
"""

import re

from bs4 import BeautifulSoup, Tag
from markdownify import markdownify as md

from ..blocks import Block, BlockKind


class MarkdownRenderer:
    """Renders blocks as normalized Markdown text."""

    HEADING_TAGS = {
        BlockKind.TITLE: "h1",
        BlockKind.SECTION_HEADER: "h2",
    }
    URL_TOKEN = re.compile(r"\S*http\S*")

    def render(self, blocks: list[Block]) -> str:
        if not blocks:
            return ""
        html = self.to_semantic_html(blocks)
        md_text = md(html, heading_style="ATX", bullets="-", escape_misc=False)
        return normalize_blank_lines(md_text)

    def to_semantic_html(self, blocks: list[Block]) -> str:
        """Render blocks as plain semantic HTML without theme classes."""
        soup = BeautifulSoup("", "html.parser")
        current_list = None

        for block in blocks:
            if block.kind == BlockKind.BULLET_ITEM:
                if current_list is None:
                    current_list = soup.new_tag("ul")
                    soup.append(current_list)
                item = soup.new_tag("li")
                item.string = block.text
                current_list.append(item)
                continue

            if block.kind == BlockKind.SUB_BULLET_ITEM:
                current_list = self._append_sub_bullet(soup, current_list, block)
                continue

            current_list = None
            if block.kind == BlockKind.SPACER:
                continue

            tag_name = self.HEADING_TAGS.get(block.kind, "p")
            element = soup.new_tag(tag_name)
            if block.kind == BlockKind.LINK_LINE:
                if block.label:
                    element.append(f"{block.label}: ")
                self._append_link(soup, element, block.url)
            elif block.kind == BlockKind.PARAGRAPH and block.has_emphasis:
                for span in block.spans:
                    if span.emphasis:
                        strong = soup.new_tag("strong")
                        strong.string = span.text
                        element.append(strong)
                    else:
                        element.append(span.text)
            else:
                element.string = block.text
            soup.append(element)

        return str(soup)

    @classmethod
    def _append_link(cls, soup: BeautifulSoup, element: Tag, url: str) -> None:
        """Link only the whitespace-free ``http`` token; the rest stays text."""
        match = cls.URL_TOKEN.search(url)
        if match is None:
            element.append(url)
            return

        if match.start() > 0:
            element.append(url[:match.start()])
        anchor = soup.new_tag("a", attrs={"href": match.group(0)})
        anchor.string = match.group(0)
        element.append(anchor)
        if match.end() < len(url):
            element.append(url[match.end():])

    @staticmethod
    def _append_sub_bullet(soup: BeautifulSoup, current_list, block: Block) -> Tag:
        """Nest a sub-bullet under the last list item, or start a new list."""
        text = block.text.lstrip("+").strip()
        item = soup.new_tag("li")
        item.string = text

        if current_list is None:
            current_list = soup.new_tag("ul")
            soup.append(current_list)

        parents = current_list.find_all("li", recursive=False)
        if not parents:
            current_list.append(item)
            return current_list

        parent = parents[-1]
        nested = parent.find("ul", recursive=False)
        if nested is None:
            nested = soup.new_tag("ul")
            parent.append(nested)
        nested.append(item)
        return current_list


def normalize_blank_lines(md_text: str) -> str:
    """Collapse runs of blank lines and trim the output."""
    lines = md_text.split("\n")
    cleaned = []
    blank_count = 0
    for line in lines:
        if line.strip() == "":
            blank_count += 1
            if blank_count <= 1:
                cleaned.append("")
        else:
            blank_count = 0
            cleaned.append(line.rstrip())

    return "\n".join(cleaned).strip() + "\n"
