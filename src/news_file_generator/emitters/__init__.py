"""Emitters for writing generated content files."""

from .front_matter_emitter import FrontMatterEmitter

__all__ = ["FrontMatterEmitter"]
