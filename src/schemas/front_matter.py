"""Front matter schema for generated news files.

The generated file is a YAML block between two ``---`` lines:

    ---
    edition: Winter 2024
    title: Example headline
    image: 0123456789abcdef.jpg
    description: Example description
    icon: example.com.png
    link: https://example.com/a
    ---

Field order is fixed so that regenerated files diff cleanly.
"""

from typing import Any

from pydantic import BaseModel

from .parsed_issue import ParsedIssue


class NewsFrontMatter(BaseModel):
    """Front matter record for a news appearance.

    Attributes:
        edition: Edition the appearance belongs to
        title: Page title
        image: Cover image filename, emitted as null when missing
        description: Page description
        icon: Favicon filename, omitted from the output when missing
        link: URL of the news appearance
    """

    edition: str
    title: str = ""
    image: str | None = None
    description: str = ""
    icon: str | None = None
    link: str

    @classmethod
    def from_issue(cls, issue: ParsedIssue) -> "NewsFrontMatter":
        """Build the front matter record from an enriched issue."""
        return cls(
            edition=issue.edition,
            title=issue.title,
            image=issue.image,
            description=issue.description,
            icon=issue.icon,
            link=issue.link,
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Return the record as an ordered dict ready for YAML serialization."""
        data = self.model_dump()
        if data["icon"] is None:
            del data["icon"]
        return data
