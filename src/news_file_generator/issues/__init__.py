"""Issue body parsing."""

from .parser import HEADINGS, IssueParser, parse_issue

__all__ = ["HEADINGS", "IssueParser", "parse_issue"]
