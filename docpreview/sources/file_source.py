"""
Local text sources: files on disk and standard input.
"""

import os
import sys


class FileSource:
    """Reads plain-text and markdown documents from disk."""

    SUPPORTED_EXTENSIONS = {".txt", ".text", ".md", ".markdown"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        if not os.path.isfile(file_path):
            return False
        _, ext = os.path.splitext(file_path.lower())
        return ext in FileSource.SUPPORTED_EXTENSIONS or ext == ""

    @staticmethod
    def load(file_path: str) -> str:
        """
        Read a document as UTF-8 text.

        Undecodable bytes are replaced rather than rejected.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Text file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()


class StdinSource:
    """Reads a document from standard input when the source is ``-``."""

    MARKER = "-"

    @staticmethod
    def can_handle(source: str) -> bool:
        return source == StdinSource.MARKER

    @staticmethod
    def load(source: str = MARKER, stream=None) -> str:
        stream = stream or sys.stdin
        return stream.read()
