# ABOUTME: Wikipedia table source built on the MediaWiki parse API
# ABOUTME: Resolves article URLs to titles, fetches rendered HTML and selects data tables

from urllib.parse import unquote

import httpx
from bs4 import BeautifulSoup

from height_inspector.config import get_config
from height_inspector.extraction.base import HtmlTable, InvalidUrlError, SourceUnavailableError
from height_inspector.utils.logging import get_logger, log_api_call

WIKIPEDIA_API_PARAMS = {
    "action": "parse",
    "format": "json",
    "prop": "text",
    "origin": "*",
    "formatversion": "2",
}


def validate_wikipedia_url(url: str) -> str:
    """Check that a URL is well formed and points at wikipedia.org.

    Returns:
        The URL unchanged

    Raises:
        InvalidUrlError: If the URL is malformed or hosted elsewhere
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidUrlError("Please enter a valid URL") from e

    if not parsed.scheme or not parsed.host:
        raise InvalidUrlError("Please enter a valid URL")

    if not parsed.host.endswith("wikipedia.org"):
        raise InvalidUrlError("Please enter a valid Wikipedia URL")

    return url


class WikipediaTableSource:
    """Fetches an article through the MediaWiki API and exposes its data tables."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        config = get_config()
        self.api_url = config.wikipedia_api_url
        self.table_selector = config.table_selector
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": config.user_agent},
            timeout=config.request_timeout,
        )
        self.logger = get_logger(__name__)

    @staticmethod
    def get_page_title(url: str) -> str:
        """Extract the decoded page title from a Wikipedia URL."""
        # Example: "https://en.wikipedia.org/wiki/Usain_Bolt" -> "Usain_Bolt"
        return unquote(url.split("/wiki/")[-1])

    async def get_tables(self, url: str) -> list[HtmlTable]:
        """Fetch the article at ``url`` and return its data tables in document order.

        An article without matching tables yields an empty list.

        Raises:
            SourceUnavailableError: If the article could not be fetched or has no content
        """
        try:
            html = await self._fetch_page_html(url)
        except SourceUnavailableError as e:
            raise SourceUnavailableError(f"Failed to get tables: {e}") from e

        soup = BeautifulSoup(html, "html.parser")
        tables = [HtmlTable.from_element(element) for element in soup.select(self.table_selector)]

        self.logger.info(
            "Located data tables",
            url=url,
            selector=self.table_selector,
            table_count=len(tables),
            row_counts=[len(table.rows) for table in tables],
        )
        return tables

    @log_api_call("mediawiki_parse")
    async def _fetch_page_html(self, url: str) -> str:
        """Return the rendered HTML of an article."""
        params = {**WIKIPEDIA_API_PARAMS, "page": self.get_page_title(url)}

        self.logger.debug("Requesting article HTML", api_url=self.api_url, page=params["page"])

        try:
            response = await self.http_client.get(self.api_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise SourceUnavailableError(str(e)) from e
        except ValueError as e:
            raise SourceUnavailableError(f"Invalid response from Wikipedia: {e}") from e

        if not isinstance(data, dict):
            data = {}
        parse = data.get("parse")
        html = parse.get("text") if isinstance(parse, dict) else None
        if not isinstance(html, str) or not html:
            error = data.get("error")
            error_info = error.get("info") if isinstance(error, dict) else None
            self.logger.warning("Wikipedia response has no content", url=url, api_error=error_info)
            raise SourceUnavailableError("Failed to fetch Wikipedia Content")

        return html

    async def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client:
            await self.http_client.aclose()
