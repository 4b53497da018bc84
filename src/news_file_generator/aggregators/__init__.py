"""Aggregators for gathering remote assets."""

from .asset_downloader import AssetDownloader, extension_for_content_type, extension_for_url

__all__ = ["AssetDownloader", "extension_for_content_type", "extension_for_url"]
