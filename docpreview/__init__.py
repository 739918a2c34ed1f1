"""
Docpreview - Structured Text to Styled Document Previewer

Converts loosely-structured plain text (meeting transcripts, notes with
headings, bullets, bold markers, metadata and links) into typed document
blocks, and renders them as styled HTML or normalized Markdown.
"""

__version__ = "1.0.0"

from .blocks import Block, BlockKind, InlineSpan, blocks_to_json
from .grammar import Grammar, GrammarVariant, Rule, get_grammar
from .transpiler import MarkupTranspiler, transpile

__all__ = [
    "Block",
    "BlockKind",
    "InlineSpan",
    "blocks_to_json",
    "Grammar",
    "GrammarVariant",
    "Rule",
    "get_grammar",
    "MarkupTranspiler",
    "transpile",
]
