"""
Block data structures produced by the markup transpiler.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class BlockKind(Enum):
    """Kinds of blocks a document line can be classified as."""
    TITLE = "title"
    SECTION_HEADER = "section_header"
    METADATA_LINE = "metadata_line"
    BULLET_ITEM = "bullet_item"
    SUB_BULLET_ITEM = "sub_bullet_item"
    LINK_LINE = "link_line"
    PARAGRAPH = "paragraph"
    SPACER = "spacer"


@dataclass(frozen=True)
class InlineSpan:
    """A run of paragraph text, optionally rendered with bold emphasis."""
    text: str
    emphasis: bool = False

    def to_dict(self) -> dict:
        return {"text": self.text, "emphasis": self.emphasis}


@dataclass(frozen=True)
class Block:
    """
    One classified unit of transpiler output.

    ``text`` holds the extracted content for every kind except ``SPACER``.
    ``LINK_LINE`` blocks also carry ``label`` and ``url``; ``PARAGRAPH``
    blocks carry their inline ``spans``.
    """
    kind: BlockKind
    text: str = ""
    label: Optional[str] = None
    url: Optional[str] = None
    spans: tuple[InlineSpan, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.kind == BlockKind.LINK_LINE and self.url is None:
            raise ValueError("Link line blocks require a url")
        if self.kind == BlockKind.SPACER and self.text:
            raise ValueError(f"Spacer blocks carry no text, got {self.text!r}")

    @property
    def has_emphasis(self) -> bool:
        """True if any inline span of this block is emphasized."""
        return any(span.emphasis for span in self.spans)

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the block."""
        data = {"kind": self.kind.value}
        if self.kind != BlockKind.SPACER:
            data["text"] = self.text
        if self.kind == BlockKind.LINK_LINE:
            data["label"] = self.label
            data["url"] = self.url
        if self.spans:
            data["spans"] = [span.to_dict() for span in self.spans]
        return data


def title(text: str) -> Block:
    return Block(BlockKind.TITLE, text)


def section_header(text: str) -> Block:
    return Block(BlockKind.SECTION_HEADER, text)


def metadata_line(text: str) -> Block:
    return Block(BlockKind.METADATA_LINE, text)


def bullet_item(text: str) -> Block:
    return Block(BlockKind.BULLET_ITEM, text)


def sub_bullet_item(text: str) -> Block:
    return Block(BlockKind.SUB_BULLET_ITEM, text)


def link_line(text: str, label: str, url: str) -> Block:
    return Block(BlockKind.LINK_LINE, text, label=label, url=url)


def paragraph(text: str, spans: Optional[tuple[InlineSpan, ...]] = None) -> Block:
    """Build a paragraph block; without spans the whole text is one plain span."""
    if spans is None:
        spans = (InlineSpan(text),)
    return Block(BlockKind.PARAGRAPH, text, spans=tuple(spans))


def spacer() -> Block:
    return Block(BlockKind.SPACER)


def blocks_to_json(blocks: list[Block], indent: int = 2) -> str:
    """Serialize a block sequence to a JSON array string."""
    return json.dumps([block.to_dict() for block in blocks], indent=indent, ensure_ascii=False)
