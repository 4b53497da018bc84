"""Schema definitions for the news file generator."""

from .front_matter import NewsFrontMatter
from .page_metadata import PageMetadata
from .parsed_issue import ParsedIssue

__all__ = [
    "NewsFrontMatter",
    "PageMetadata",
    "ParsedIssue",
]
