"""
Line-oriented transpiler from structured plain text to typed blocks.

The transpiler is a pure function of its input: each line is classified by
the first matching rule of the selected grammar, and the resulting blocks are
returned in input order. It never raises for any string input.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Union

from .blocks import (
    Block,
    InlineSpan,
    bullet_item,
    link_line,
    metadata_line,
    paragraph,
    section_header,
    spacer,
    sub_bullet_item,
    title,
)
from .grammar import Grammar, GrammarVariant, Rule, get_grammar


EMPHASIS_MARKER = "**"


@dataclass
class FoldState:
    """Accumulator carried from line to line while transpiling."""
    blocks: list[Block] = field(default_factory=list)
    emitted: bool = False
    in_blank_run: bool = False


class MarkupTranspiler:
    """
    Converts structured plain text into a list of blocks for one grammar.

    Rules are tried in a fixed priority order; a line matching an earlier
    rule never reaches a later one.
    """

    PATTERNS = {
        "metadata": re.compile(r"^\*\*.*:\*\*"),
        "emphasis": re.compile(r"\*\*(.*?)\*\*"),
    }

    def __init__(self, grammar: Union[Grammar, GrammarVariant, str] = GrammarVariant.PREVIEWER):
        """
        Initialize the transpiler.

        Args:
            grammar: Grammar config, variant, or variant name.

        Raises:
            ValueError: If the grammar name is unknown.
        """
        self.grammar = get_grammar(grammar)
        self._matchers = {
            Rule.TITLE: self._match_title,
            Rule.SECTION_HEADER: self._match_section_header,
            Rule.METADATA: self._match_metadata,
            Rule.BULLET: self._match_bullet,
            Rule.SUB_BULLET: self._match_sub_bullet,
            Rule.LINK: self._match_link,
            Rule.INLINE_EMPHASIS: self._match_inline_emphasis,
            Rule.PARAGRAPH: self._match_paragraph,
        }
        self._rules = [
            self._matchers[rule]
            for rule in self.grammar.ordered_rules
            if rule in self._matchers
        ]

    def transpile(self, text: str) -> list[Block]:
        """
        Transpile a whole document.

        Args:
            text: Raw document text; lines are separated by ``"\\n"``.

        Returns:
            Blocks in input line order. Empty text yields an empty list.
        """
        if not text:
            return []

        state = FoldState()
        for line in text.split("\n"):
            state = self.step(state, line)
        return state.blocks

    def step(self, state: FoldState, raw_line: str) -> FoldState:
        """Fold one input line into the accumulator."""
        line = raw_line.strip()

        if not line:
            # Blank lines before any content are dropped
            if not state.emitted or not self.grammar.uses(Rule.SPACER):
                return state
            if state.in_blank_run and self.grammar.collapse_blank_runs:
                return state
            state.blocks.append(spacer())
            state.in_blank_run = True
            return state

        block = self.classify_line(line)
        if block is not None:
            state.blocks.append(block)
            state.emitted = True
        state.in_blank_run = False
        return state

    def classify_line(self, line: str) -> Optional[Block]:
        """Return the block for a stripped, non-empty line."""
        for matcher in self._rules:
            block = matcher(line)
            if block is not None:
                return block
        return None

    def _match_title(self, line: str) -> Optional[Block]:
        marker = self.grammar.title_marker
        if line.startswith(marker):
            return title(line[len(marker):])
        return None

    def _match_section_header(self, line: str) -> Optional[Block]:
        marker = self.grammar.section_marker
        if line.startswith(marker):
            return section_header(line[len(marker):])
        return None

    def _match_metadata(self, line: str) -> Optional[Block]:
        if self.PATTERNS["metadata"].match(line):
            return metadata_line(line.replace(EMPHASIS_MARKER, ""))
        return None

    def _match_bullet(self, line: str) -> Optional[Block]:
        marker = self.grammar.bullet_marker
        if line.startswith(marker):
            return bullet_item(line[len(marker):])
        return None

    def _match_sub_bullet(self, line: str) -> Optional[Block]:
        if line.startswith(self.grammar.sub_bullet_marker):
            return sub_bullet_item(line)
        return None

    def _match_link(self, line: str) -> Optional[Block]:
        if self.grammar.link_token not in line:
            return None
        label, url = split_link(line, self.grammar.link_separator)
        return link_line(line, label, url)

    def _match_inline_emphasis(self, line: str) -> Optional[Block]:
        if not self.PATTERNS["emphasis"].search(line):
            return None
        return paragraph(line, split_emphasis(line))

    def _match_paragraph(self, line: str) -> Optional[Block]:
        return paragraph(line)


def split_link(line: str, separator: str = ": ") -> tuple[str, str]:
    """
    Split a link line into ``(label, url)`` on the first separator.

    Without a separator the label is empty and the whole line is the url.
    """
    label, sep, url = line.partition(separator)
    if not sep:
        return "", line
    return label, url


def split_emphasis(line: str) -> tuple[InlineSpan, ...]:
    """
    Break a line into plain and emphasized spans.

    Each ``**X**`` pair, matched non-greedily from the left, becomes an
    emphasized span. An unterminated ``**`` stays in the plain text.
    """
    spans = []
    pos = 0
    for match in MarkupTranspiler.PATTERNS["emphasis"].finditer(line):
        if match.start() > pos:
            spans.append(InlineSpan(line[pos:match.start()]))
        spans.append(InlineSpan(match.group(1), emphasis=True))
        pos = match.end()
    if pos < len(line):
        spans.append(InlineSpan(line[pos:]))
    return tuple(spans)


def transpile(
    text: str,
    grammar: Union[Grammar, GrammarVariant, str] = GrammarVariant.PREVIEWER,
) -> list[Block]:
    """Transpile ``text`` with the given grammar."""
    return MarkupTranspiler(grammar).transpile(text)
