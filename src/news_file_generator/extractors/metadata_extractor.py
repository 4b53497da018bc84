"""Metadata extraction from news appearance pages."""

import logging
from urllib.parse import urljoin

from lxml import html

from news_file_generator.clients import ClientError, PageClient
from schemas.page_metadata import PageMetadata

logger = logging.getLogger(__name__)

DEFAULT_FAVICON_PATH = "/favicon.ico"


class MetadataExtractor:
    """Pulls title, description, cover image and favicon from a web page.

    Each extraction fetches the page on its own; nothing is cached between
    calls. Fetch and parse failures are logged and reported as a missing
    result, never raised.

    Example:
        with PageClient() as client:
            extractor = MetadataExtractor(client)
            cover_url = extractor.extract_cover_image_url("https://example.com/a")
    """

    def __init__(self, page_client: PageClient):
        """Initialize the extractor.

        Args:
            page_client: Client used to fetch and parse pages
        """
        self.page_client = page_client

    def extract_metadata(self, page_url: str) -> PageMetadata | None:
        """Extract the title and description of a page.

        The description prefers the Open Graph description, then the
        standard meta description, then "".

        Args:
            page_url: URL of the page

        Returns:
            PageMetadata, or None if the page could not be fetched
        """
        document = self._fetch(page_url, "title and description")
        if document is None:
            return None

        title = "".join(element.text_content() for element in document.iter("title"))
        description = (
            self._meta_content(document, "property", "og:description")
            or self._meta_content(document, "name", "description")
            or ""
        )
        return PageMetadata(title=title, description=description)

    def extract_cover_image_url(self, page_url: str) -> str | None:
        """Extract the Open Graph image URL of a page.

        Args:
            page_url: URL of the page

        Returns:
            The absolute og:image URL, or None if absent or the page could
            not be fetched
        """
        document = self._fetch(page_url, "og:image")
        if document is None:
            return None

        image_url = self._meta_content(document, "property", "og:image")
        if not image_url:
            return None
        # Relative og:image values are resolved against the page
        return urljoin(page_url, image_url)

    def extract_favicon_url(self, page_url: str) -> str | None:
        """Extract the absolute favicon URL of a page.

        Looks for ``<link rel="icon">``, then ``<link rel="shortcut icon">``,
        then falls back to ``/favicon.ico``. The result is resolved against
        the page URL.

        Args:
            page_url: URL of the page

        Returns:
            Absolute favicon URL, or None if the page could not be fetched
        """
        document = self._fetch(page_url, "favicon")
        if document is None:
            return None

        href = (
            self._link_href(document, "icon")
            or self._link_href(document, "shortcut icon")
            or DEFAULT_FAVICON_PATH
        )
        try:
            return urljoin(page_url, href)
        except ValueError as e:
            logger.warning(f"Invalid favicon URL {href!r} on {page_url}: {e}")
            return None

    def _fetch(self, page_url: str, purpose: str) -> html.HtmlElement | None:
        try:
            return self.page_client.fetch(page_url)
        except (ClientError, ValueError) as e:
            logger.warning(f"Error fetching the {purpose} from {page_url!r}: {e}")
            return None

    @staticmethod
    def _meta_content(document: html.HtmlElement, attribute: str, value: str) -> str | None:
        """Return the content of the first meta tag whose attribute equals value."""
        elements = document.xpath(f"//meta[@{attribute}=$value]", value=value)
        if not elements:
            return None
        return elements[0].get("content")

    @staticmethod
    def _link_href(document: html.HtmlElement, rel: str) -> str | None:
        """Return the href of the first link tag with an exact rel value."""
        elements = document.xpath("//link[@rel=$rel]", rel=rel)
        if not elements:
            return None
        return elements[0].get("href")
