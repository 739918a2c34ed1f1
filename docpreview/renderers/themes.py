"""
Static themes for HTML output: CSS class hooks and stylesheets per grammar.
"""

from dataclasses import dataclass

from ..blocks import BlockKind
from ..grammar import GrammarVariant


@dataclass(frozen=True)
class Theme:
    """Class names emitted for each block kind, plus the matching stylesheet."""
    name: str
    block_classes: dict
    emphasis_class: str
    link_class: str
    spacer_class: str
    container_class: str
    stylesheet: str

    def class_for(self, kind: BlockKind) -> str:
        return self.block_classes.get(kind, self.block_classes[BlockKind.PARAGRAPH])


PREVIEWER_STYLESHEET = """
.preview-container {
  padding: 0 20px;
}
.title {
  color: rgb(67, 70, 187);
  font-family: "Google Sans", Roboto, Arial, sans-serif;
  font-size: 20pt;
  line-height: 1.2;
  margin-bottom: 14pt;
}
.section-header {
  color: rgb(32, 33, 36);
  font-family: "Google Sans", Roboto, Arial, sans-serif;
  font-size: 16pt;
  line-height: 1.2;
  margin: 20pt 0 14pt 0;
  font-weight: 400;
}
.bullet-list {
  margin-left: 36pt;
  position: relative;
  line-height: 1.5;
  margin-bottom: 8pt;
  color: rgb(32, 33, 36);
  font-family: "Google Sans", Roboto, Arial, sans-serif;
  font-size: 11pt;
}
.bullet-point::before {
  content: "\\2022";
  position: absolute;
  left: -18pt;
}
.sub-bullet {
  margin-left: 72pt;
}
.text {
  color: rgb(32, 33, 36);
  font-family: "Google Sans", Roboto, Arial, sans-serif;
  font-size: 11pt;
  line-height: 1.5;
  margin-bottom: 8pt;
}
.link {
  color: rgb(17, 85, 204);
  text-decoration: underline;
  cursor: pointer;
}
.bold {
  font-weight: bold;
}
.spacer {
  height: 12pt;
}
"""

DOC_STYLE_STYLESHEET = """
.gdoc-container {
  max-width: 850px;
  margin: 0 auto;
  padding: 40px 96px;
  font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
  font-size: 11pt;
  line-height: 1.5;
  color: #202124;
  background: white;
}
.gdoc-header-l1 {
  font-size: 24pt;
  color: #202124;
  margin: 24pt 0 16pt;
  font-weight: 500;
}
.gdoc-header-l2 {
  font-size: 20pt;
  color: #202124;
  margin: 20pt 0 14pt;
  font-weight: 500;
}
.gdoc-text {
  font-size: 11pt;
  line-height: 1.5;
  margin-bottom: 8pt;
}
.gdoc-bold {
  font-weight: bold;
}
.spacer {
  height: 12pt;
}
"""

PREVIEWER_THEME = Theme(
    name="previewer",
    block_classes={
        BlockKind.TITLE: "title",
        BlockKind.SECTION_HEADER: "section-header",
        BlockKind.METADATA_LINE: "text",
        BlockKind.BULLET_ITEM: "bullet-list bullet-point",
        BlockKind.SUB_BULLET_ITEM: "bullet-list bullet-point sub-bullet",
        BlockKind.LINK_LINE: "text",
        BlockKind.PARAGRAPH: "text",
    },
    emphasis_class="bold",
    link_class="link",
    spacer_class="spacer",
    container_class="preview-container",
    stylesheet=PREVIEWER_STYLESHEET,
)

DOC_STYLE_THEME = Theme(
    name="doc_style",
    block_classes={
        BlockKind.TITLE: "gdoc-header-l1",
        BlockKind.SECTION_HEADER: "gdoc-header-l2",
        BlockKind.PARAGRAPH: "gdoc-text",
    },
    emphasis_class="gdoc-bold",
    link_class="link",
    spacer_class="spacer",
    container_class="gdoc-container",
    stylesheet=DOC_STYLE_STYLESHEET,
)

THEMES = {
    GrammarVariant.PREVIEWER: PREVIEWER_THEME,
    GrammarVariant.DOC_STYLE: DOC_STYLE_THEME,
}
