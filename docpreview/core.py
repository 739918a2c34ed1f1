"""
Docpreview Core Engine

Loads structured text from a file, directory, URL or stdin, runs it through
the markup transpiler and renders the result as a styled HTML page,
normalized Markdown, or a JSON block listing.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Union

from .blocks import Block, blocks_to_json
from .grammar import Grammar, GrammarVariant, get_grammar
from .renderers.html_renderer import HtmlRenderer
from .renderers.markdown_renderer import MarkdownRenderer
from .sources.file_source import FileSource, StdinSource
from .sources.web_source import WebSource
from .transpiler import MarkupTranspiler


OUTPUT_EXTENSIONS = {
    "html": ".html",
    "markdown": ".md",
    "json": ".json",
}

NO_INPUT_PLACEHOLDER = "No input provided"


class Previewer:
    """
    Main preview engine.

    Accepts any supported source (file path, URL, directory, or ``-``)
    and produces rendered output in the configured format.
    """

    def __init__(
        self,
        output_dir: str = None,
        grammar: Union[Grammar, GrammarVariant, str] = GrammarVariant.PREVIEWER,
        output_format: str = "html",
    ):
        if output_format not in OUTPUT_EXTENSIONS:
            choices = ", ".join(OUTPUT_EXTENSIONS)
            raise ValueError(f"Unknown output format: {output_format!r} (choose from {choices})")

        self.grammar = get_grammar(grammar)
        self.output_format = output_format
        self.output_dir = output_dir or os.path.join(os.getcwd(), "docpreview_output")
        os.makedirs(self.output_dir, exist_ok=True)

        self.transpiler = MarkupTranspiler(self.grammar)
        self.html_renderer = HtmlRenderer(self.grammar)
        self.markdown_renderer = MarkdownRenderer()

    def preview_text(self, text: str, title: str = "Preview") -> str:
        """Transpile ``text`` and render it in the configured format."""
        blocks = self.transpiler.transpile(text)
        return self.render(blocks, title=title)

    def render(self, blocks: list[Block], title: str = "Preview") -> str:
        if self.output_format == "markdown":
            return self.markdown_renderer.render(blocks)
        if self.output_format == "json":
            return blocks_to_json(blocks) + "\n"
        return self.html_renderer.render_document(blocks, title=title)

    def preview(self, source: str, save: bool = True) -> str:
        """
        Render a source.

        Args:
            source: File path, URL, directory path, or ``-`` for stdin
            save: If True, save the output next to the other results

        Returns:
            The rendered output
        """
        source = source.strip()

        if StdinSource.can_handle(source):
            print("[STDIN] Reading from standard input", file=sys.stderr)
            text = StdinSource.load(source)
            out_name = "stdin"
            page_title = "stdin"

        elif WebSource.can_handle(source):
            print(f"[URL] Previewing: {source}", file=sys.stderr)
            text = WebSource.load(source)
            out_name = _url_to_name(source)
            page_title = source

        elif os.path.isdir(source):
            print(f"[DIR] Previewing all supported files in: {source}", file=sys.stderr)
            return self.preview_directory(source, save=save)

        elif FileSource.can_handle(source):
            print(f"[FILE] Previewing: {source}", file=sys.stderr)
            text = FileSource.load(source)
            out_name = _file_to_name(source)
            page_title = os.path.basename(source)

        else:
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file path, directory, URL, or '-' for stdin."
            )

        output = self.preview_text(text, title=page_title)

        if save:
            self._save(out_name, output)

        return output

    def preview_directory(self, dir_path: str, save: bool = True) -> str:
        """Render every supported text file in a directory."""
        results = []
        previewed_count = 0

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not FileSource.can_handle(file_path):
                continue

            try:
                output = self.preview_text(FileSource.load(file_path), title=filename)
                if save:
                    self._save(_file_to_name(file_path), output)
                results.append(output)
                previewed_count += 1
            except (OSError, UnicodeError) as e:
                print(f"[ERROR] Failed to preview {filename}: {e}", file=sys.stderr)

        print(f"[DIR] Previewed {previewed_count} file(s) from {dir_path}", file=sys.stderr)
        return "\n".join(results)

    def _save(self, name: str, output: str) -> str:
        out_path = os.path.join(self.output_dir, name + OUTPUT_EXTENSIONS[self.output_format])
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"[SAVED] {out_path}", file=sys.stderr)
        return out_path

    @staticmethod
    def supported_grammars() -> dict:
        """Return the heading markers and rules of every grammar."""
        listing = {}
        for variant in GrammarVariant:
            grammar = get_grammar(variant)
            listing[variant.value] = {
                "title_marker": grammar.title_marker.strip(),
                "section_marker": grammar.section_marker.strip(),
                "rules": [rule.value for rule in grammar.ordered_rules],
                "collapse_blank_runs": grammar.collapse_blank_runs,
            }
        return listing

    @staticmethod
    def supported_sources() -> dict:
        """Return a dictionary of all supported input sources."""
        return {
            "Text files": sorted(FileSource.SUPPORTED_EXTENSIONS),
            "Web pages": ["http://", "https://"],
            "Standard input": [StdinSource.MARKER],
        }


@dataclass
class PreviewSession:
    """
    Bound input field of a live preview widget.

    Every input change bumps the revision. Renders are computed against a
    revision, and only the result for the newest revision is accepted, so a
    slow render of stale input can never overwrite a newer preview.
    """
    grammar: Union[Grammar, GrammarVariant, str] = GrammarVariant.PREVIEWER
    placeholder: str = NO_INPUT_PLACEHOLDER
    input_text: str = ""
    revision: int = 0
    current_html: Optional[str] = None
    accepted_revision: int = field(default=-1)

    def __post_init__(self):
        self.grammar = get_grammar(self.grammar)
        self._transpiler = MarkupTranspiler(self.grammar)
        self._renderer = HtmlRenderer(self.grammar)

    def set_input(self, text: str) -> int:
        """Replace the input text and return the new revision."""
        self.input_text = text or ""
        self.revision += 1
        return self.revision

    def render(self) -> tuple[int, str]:
        """Render the current input; returns ``(revision, html)``."""
        blocks = self._transpiler.transpile(self.input_text)
        html = self._renderer.render_fragment(blocks, placeholder=self.placeholder)
        return self.revision, html

    def accept(self, revision: int, html: str) -> bool:
        """Store a rendered result unless a newer input has arrived."""
        if revision != self.revision or revision <= self.accepted_revision:
            return False
        self.current_html = html
        self.accepted_revision = revision
        return True

    def refresh(self) -> str:
        """Render and accept the current input in one step."""
        revision, html = self.render()
        self.accept(revision, html)
        return self.current_html


def _file_to_name(file_path: str) -> str:
    """Generate an output base name from the source file."""
    basename = os.path.basename(file_path)
    name, _ = os.path.splitext(basename)
    # Sanitize filename
    return "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)


def _url_to_name(url: str) -> str:
    """Generate an output base name from a URL."""
    from urllib.parse import urlparse
    parsed = urlparse(url)
    path = parsed.path.strip("/").replace("/", "_") or "index"
    domain = parsed.netloc.replace(".", "_")
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in f"{domain}_{path}")
