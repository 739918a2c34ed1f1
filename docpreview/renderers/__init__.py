from .html_renderer import HtmlRenderer, DEFAULT_PLACEHOLDER
from .markdown_renderer import MarkdownRenderer
from .themes import Theme, THEMES, PREVIEWER_THEME, DOC_STYLE_THEME

__all__ = [
    "HtmlRenderer",
    "MarkdownRenderer",
    "Theme",
    "THEMES",
    "PREVIEWER_THEME",
    "DOC_STYLE_THEME",
    "DEFAULT_PLACEHOLDER",
]
