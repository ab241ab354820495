"""HTTP client for the Alpine package contents index using httpx."""

import logging

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from . import __version__
from .errors import FetchError, ParseError
from .extract import extract_records
from .models import RecordSet, SearchQuery
from .query import search_url
from .settings import get_settings

logger = logging.getLogger(__name__)


def parse_document(body: bytes) -> BeautifulSoup:
    """Parse a response body into a queryable document."""
    if not body or not body.strip():
        raise ParseError("response body is empty")
    try:
        return BeautifulSoup(body, "lxml")
    except ParserRejectedMarkup as e:
        raise ParseError(f"creating document failed: {e}") from e


class ContentsClient:
    """Single-shot client for the contents search page. No retries, no cache."""

    def __init__(self, base_url: str, timeout: float | None = None):
        self.base_url = base_url
        self._client = httpx.Client(
            headers={"User-Agent": f"apk-file/{__version__}"},
            timeout=timeout,
            follow_redirects=True,
        )

    def fetch(self, url: str) -> bytes:
        """GET ``url`` and return the raw body. Raises FetchError on failure."""
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        if not 200 <= resp.status_code < 300:
            raise FetchError(url, f"HTTP {resp.status_code}")
        return resp.content

    def search(self, query: SearchQuery) -> RecordSet:
        """Run one lookup: fetch the results page and extract its records."""
        url = search_url(query, self.base_url)
        logger.debug("requesting from %s", url)
        document = parse_document(self.fetch(url))
        return extract_records(document)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def get_client() -> ContentsClient:
    """Create a ContentsClient configured from settings."""
    settings = get_settings()
    return ContentsClient(settings.contents_url, timeout=settings.timeout)
