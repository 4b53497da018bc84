"""Extractors for harvesting metadata from fetched pages."""

from .metadata_extractor import MetadataExtractor

__all__ = ["MetadataExtractor"]
