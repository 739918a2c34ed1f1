"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from docpreview.grammar import GrammarVariant
from docpreview.transpiler import MarkupTranspiler
from docpreview.renderers.html_renderer import HtmlRenderer
from docpreview.core import Previewer
from tests.fixtures import (
    SAMPLE_PREVIEWER_NOTES,
    SAMPLE_DOC_STYLE_REVIEW,
    SAMPLE_HTML_PAGE,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def previewer_transpiler():
    """Transpiler using the previewer grammar."""
    return MarkupTranspiler(GrammarVariant.PREVIEWER)


@pytest.fixture
def doc_style_transpiler():
    """Transpiler using the doc style grammar."""
    return MarkupTranspiler(GrammarVariant.DOC_STYLE)


@pytest.fixture
def previewer_renderer():
    return HtmlRenderer(GrammarVariant.PREVIEWER)


@pytest.fixture
def doc_style_renderer():
    return HtmlRenderer(GrammarVariant.DOC_STYLE)


@pytest.fixture
def output_dir(tmp_path):
    """Directory receiving rendered files."""
    return tmp_path / "out"


@pytest.fixture
def previewer(output_dir):
    """Previewer writing HTML into a temporary directory."""
    return Previewer(output_dir=str(output_dir))


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def previewer_notes():
    return SAMPLE_PREVIEWER_NOTES


@pytest.fixture
def doc_style_review():
    return SAMPLE_DOC_STYLE_REVIEW


@pytest.fixture
def html_page():
    return SAMPLE_HTML_PAGE


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def notes_file(tmp_path, previewer_notes):
    """Create a temporary notes file."""
    file_path = tmp_path / "weekly_sync.txt"
    file_path.write_text(previewer_notes, encoding="utf-8")
    return file_path


@pytest.fixture
def notes_dir(tmp_path, previewer_notes, doc_style_review):
    """Create a directory with supported and unsupported files."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a_sync.txt").write_text(previewer_notes, encoding="utf-8")
    (docs / "b_review.md").write_text(doc_style_review, encoding="utf-8")
    (docs / "c_scan.pdf").write_bytes(b"%PDF-1.4")
    (docs / "NOTES").write_text("# Standup\n- no blockers\n", encoding="utf-8")
    (docs / "nested").mkdir()
    return docs


# ============================================================================
# Network Fixtures
# ============================================================================


@pytest.fixture
def make_response():
    """Factory for fake requests responses."""
    def _make(text, content_type="text/html; charset=utf-8", status_error=None):
        response = MagicMock()
        response.text = text
        response.headers = {"Content-Type": content_type}
        if status_error is not None:
            response.raise_for_status.side_effect = status_error
        return response
    return _make
