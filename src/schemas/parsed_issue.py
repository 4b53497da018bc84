"""Parsed news appearance issue domain object."""

from dataclasses import dataclass


@dataclass
class ParsedIssue:
    """Represents a news appearance submission as it moves through the pipeline.

    Created by the issue parser, filled in by enrichment, and consumed once
    by the front-matter emitter.

    Attributes:
        link: URL of the news appearance
        edition: Edition the appearance belongs to
        date: Publication date token, used as the output filename prefix
        title: Page title harvested from the link
        description: Page description harvested from the link
        image: Cover image filename (``<hash>.<ext>``), or None if no cover
        icon: Favicon filename (``<hostname>.<ext>``); None means unset and
            the key is left out of the emitted document
    """

    link: str
    edition: str
    date: str
    title: str = ""
    description: str = ""
    image: str | None = None
    icon: str | None = None
