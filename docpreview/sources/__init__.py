from .file_source import FileSource, StdinSource
from .web_source import WebSource, html_to_text

__all__ = ["FileSource", "StdinSource", "WebSource", "html_to_text"]
