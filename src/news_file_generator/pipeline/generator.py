"""End-to-end generation of a news file from an issue body."""

import logging
from pathlib import Path

from news_file_generator.aggregators import AssetDownloader
from news_file_generator.clients import PageClient
from news_file_generator.emitters import FrontMatterEmitter
from news_file_generator.extractors import MetadataExtractor
from news_file_generator.issues import IssueParser
from news_file_generator.pipeline.enricher import NewsEnricher

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "news-file-generator/1.0"


def generate_news_file(
    issue_body: str,
    output_dir: Path,
    images_dir: Path,
    *,
    strict: bool = False,
    client_config: dict | None = None,
) -> Path:
    """Parse, enrich and write a news file for one issue.

    Network failures during enrichment are logged and leave fields empty.
    Only a failure to write the document propagates.

    Args:
        issue_body: Raw issue body text
        output_dir: Directory for the generated document
        images_dir: Root images directory for covers and icons
        strict: Resolve missing headings to "" instead of the first line
        client_config: Config dict for the page client (timeout, headers, ...)

    Returns:
        Path of the written document
    """
    config = client_config or {"headers": {"User-Agent": DEFAULT_USER_AGENT}}
    issue = IssueParser(strict=strict).parse(issue_body)
    logger.info(f"Parsed news appearance {issue.link!r} ({issue.edition}, {issue.date})")

    with PageClient(config) as page_client:
        with AssetDownloader(http_client=page_client.client) as downloader:
            enricher = NewsEnricher(
                MetadataExtractor(page_client),
                downloader,
                images_dir,
            )
            enricher.enrich(issue)

    return FrontMatterEmitter(output_dir).write(issue)
