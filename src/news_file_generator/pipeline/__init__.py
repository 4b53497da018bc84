"""Enrichment pipeline for news appearances."""

from .enricher import NewsEnricher
from .generator import generate_news_file

__all__ = ["NewsEnricher", "generate_news_file"]
