"""Page metadata harvested from a fetched HTML document."""

from dataclasses import dataclass


@dataclass
class PageMetadata:
    """Title and description of a web page.

    Attributes:
        title: Text of the page's title element
        description: Open Graph description, else meta description, else ""
    """

    title: str = ""
    description: str = ""
