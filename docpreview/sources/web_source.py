"""
Web URL text source.

Fetches a page and reduces it to Markdown-style text so the transpiler can
pick up its headings, bullets and bold spans. Plain-text and markdown
responses are passed through untouched.
"""

from urllib.parse import urlparse

from bs4 import BeautifulSoup
from markdownify import markdownify as md

from ..renderers.markdown_renderer import normalize_blank_lines


class WebSource:
    """Loads documents from http(s) URLs."""

    DEFAULT_TIMEOUT = 30
    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    PLAIN_CONTENT_TYPES = ("text/plain", "text/markdown", "text/x-markdown")
    NOISE_TAGS = ["script", "style", "nav", "footer", "iframe", "noscript"]

    @staticmethod
    def can_handle(source: str) -> bool:
        """Check if the source looks like a URL."""
        try:
            parsed = urlparse(source)
            return parsed.scheme in ("http", "https") and bool(parsed.netloc)
        except ValueError:
            return False

    @staticmethod
    def load(url: str, timeout: int = DEFAULT_TIMEOUT) -> str:
        """
        Fetch a URL and return its content as transpiler input.

        Raises:
            requests.HTTPError: If the server answers with an error status.
            RuntimeError: If requests is not installed.
        """
        try:
            import requests
        except ImportError:
            raise RuntimeError("requests is not installed. Run: pip install requests")

        headers = {"User-Agent": WebSource.USER_AGENT}
        response = requests.get(url, headers=headers, timeout=timeout, allow_redirects=True)
        response.raise_for_status()

        content_type = response.headers.get("Content-Type", "").lower()
        path = urlparse(url).path.lower()
        if content_type.startswith(WebSource.PLAIN_CONTENT_TYPES) or path.endswith((".md", ".txt")):
            return response.text

        return html_to_text(response.text)


def html_to_text(html: str) -> str:
    """Convert an HTML page to Markdown-style text the transpiler understands."""
    soup = BeautifulSoup(html, "html.parser")

    # Remove elements that aren't content
    for tag in soup.find_all(WebSource.NOISE_TAGS):
        tag.decompose()

    content = soup.find("main") or soup.find("article") or soup.body or soup

    md_text = md(
        str(content),
        heading_style="ATX",
        bullets="-",
        strip=["img"],
        escape_misc=False,
    )

    return normalize_blank_lines(md_text)
