"""Client for fetching and parsing web pages."""

from lxml import etree
from lxml import html

from .client import Client
from .exceptions import ParseError


class PageClient(Client):
    """Fetches HTML pages and returns them as lxml documents.

    Example:
        config = {"timeout": 10, "headers": {"User-Agent": "news-file-generator"}}
        with PageClient(config) as client:
            document = client.fetch("https://example.com/a")
            title = document.findtext(".//title")
    """

    def fetch(self, url: str) -> html.HtmlElement:
        """Fetch a page and parse it as HTML.

        Args:
            url: Absolute URL of the page

        Returns:
            Root element of the parsed document

        Raises:
            ConnectionError: If the network connection fails
            FetchError: If the server returns a non-2xx response
            ParseError: If the body is empty or cannot be parsed
        """
        response = self.get(url)
        return self._parse(response.content, response.encoding or "utf-8", url)

    def _parse(self, content: bytes, encoding: str, url: str) -> html.HtmlElement:
        if not content.strip():
            raise ParseError(f"Empty document: {url}")
        try:
            parser = html.HTMLParser(encoding=encoding)
            return html.document_fromstring(content, parser=parser, base_url=url)
        except (etree.ParserError, LookupError, ValueError) as e:
            raise ParseError(f"Could not parse document {url}: {e}") from e
