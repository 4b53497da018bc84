"""Enrichment of parsed issues with remote page data.

Runs the network steps for a news appearance in a fixed order:

1. cover image (og:image) → ``<images>/news/covers/<hash>.<ext>``
2. favicon → ``<images>/news/icons/<hostname>.<ext>``
3. title and description

Every step is best effort. A failing step leaves its fields at their
defaults and the remaining steps still run.
"""

import logging
from pathlib import Path

from news_file_generator.aggregators import AssetDownloader
from news_file_generator.extractors import MetadataExtractor
from news_file_generator.hashing import hash_url
from schemas.parsed_issue import ParsedIssue

logger = logging.getLogger(__name__)


class NewsEnricher:
    """Fills in cover image, favicon, title and description for an issue.

    Attributes:
        extractor: Metadata extractor used to inspect the linked page
        downloader: Downloader used to save cover images and favicons
        covers_dir: Directory receiving cover images
        icons_dir: Directory receiving favicons
    """

    def __init__(
        self,
        extractor: MetadataExtractor,
        downloader: AssetDownloader,
        images_dir: Path,
    ):
        """Initialize the enricher.

        Args:
            extractor: Metadata extractor for the linked page
            downloader: Asset downloader for images and icons
            images_dir: Root images directory (assets go under news/)
        """
        self.extractor = extractor
        self.downloader = downloader
        self.covers_dir = images_dir / "news" / "covers"
        self.icons_dir = images_dir / "news" / "icons"

    def enrich(self, issue: ParsedIssue) -> ParsedIssue:
        """Enrich an issue in place.

        Args:
            issue: Parsed issue to enrich

        Returns:
            The same issue, with enrichment fields set where possible
        """
        content_hash = hash_url(issue.link)

        self._save_cover(issue, content_hash)
        self._save_favicon(issue)
        self._add_title_and_description(issue)

        return issue

    def _save_cover(self, issue: ParsedIssue, content_hash: str) -> None:
        image_url = self.extractor.extract_cover_image_url(issue.link)
        if image_url is None:
            logger.info(f"No cover image found for {issue.link}")
            issue.image = None
            return

        destination = self.covers_dir / content_hash
        logger.info(f"Downloading {image_url} to {destination}")
        extension = self.downloader.download(image_url, destination)
        if not extension:
            logger.error(f"Cover image {image_url} was not saved")
            issue.image = None
            return

        issue.image = f"{content_hash}.{extension}"

    def _save_favicon(self, issue: ParsedIssue) -> None:
        favicon_url = self.extractor.extract_favicon_url(issue.link)
        if favicon_url is None:
            logger.error("Couldn't find a favicon.")
            return

        filename = self.downloader.download_favicon(favicon_url, self.icons_dir)
        if filename is not None:
            issue.icon = filename

    def _add_title_and_description(self, issue: ParsedIssue) -> None:
        metadata = self.extractor.extract_metadata(issue.link)
        if metadata is None:
            logger.warning(f"Keeping empty title and description for {issue.link}")
            return

        issue.title = metadata.title
        issue.description = metadata.description
