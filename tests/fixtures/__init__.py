# Test fixtures
from .sample_documents import (
    SAMPLE_PREVIEWER_NOTES,
    EXPECTED_PREVIEWER_BLOCKS,
    SAMPLE_DOC_STYLE_REVIEW,
    EXPECTED_DOC_STYLE_BLOCKS,
    SAMPLE_HTML_PAGE,
)

__all__ = [
    "SAMPLE_PREVIEWER_NOTES",
    "EXPECTED_PREVIEWER_BLOCKS",
    "SAMPLE_DOC_STYLE_REVIEW",
    "EXPECTED_DOC_STYLE_BLOCKS",
    "SAMPLE_HTML_PAGE",
]
