"""Front matter emitter for news files."""

import logging
from pathlib import Path

import yaml

from news_file_generator.hashing import hash_url
from schemas.front_matter import NewsFrontMatter
from schemas.parsed_issue import ParsedIssue

logger = logging.getLogger(__name__)

DELIMITER = "---"


class FrontMatterEmitter:
    """Writes enriched issues as YAML front matter documents.

    Documents are named ``<date>-<hash>.md`` so that regenerating a news
    appearance overwrites the same file.

    Attributes:
        output_dir: Directory receiving the generated documents
    """

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def render(self, issue: ParsedIssue) -> str:
        """Render an issue as a front matter document.

        Args:
            issue: The enriched issue

        Returns:
            YAML block wrapped in ``---`` delimiter lines
        """
        front_matter = NewsFrontMatter.from_issue(issue)
        yaml_content = yaml.safe_dump(
            front_matter.to_yaml_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )
        return f"{DELIMITER}\n{yaml_content}{DELIMITER}"

    def output_path(self, issue: ParsedIssue) -> Path:
        """Return the document path for an issue."""
        return self.output_dir / f"{issue.date}-{hash_url(issue.link)}.md"

    def write(self, issue: ParsedIssue) -> Path:
        """Render and write an issue's document.

        Args:
            issue: The enriched issue

        Returns:
            Path of the written document

        Raises:
            OSError: If the document cannot be written
        """
        path = self.output_path(issue)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(issue), encoding="utf-8")
        logger.info(f"Wrote news file {path}")
        return path
