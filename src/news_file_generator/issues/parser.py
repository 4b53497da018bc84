"""Parser for news appearance issue bodies.

Issue bodies come from an issue-form template: each answer sits on the line
after a level-3 Markdown heading.

    ### News appearance link

    https://example.com/a

    ### From which edition is it from?

    Winter 2024
"""

import logging

from schemas.parsed_issue import ParsedIssue

logger = logging.getLogger(__name__)

HEADINGS = {
    "link": "### News appearance link",
    "edition": "### From which edition is it from?",
    "date": "### Publication date",
}


class IssueParser:
    """Extracts typed fields from a news appearance issue body.

    Lines are stripped and blank lines dropped before lookup, so the value
    of a field is always the first non-empty line after its heading.

    When a heading is missing, the lenient mode (default) falls back to the
    first non-empty line of the body, which is what earlier versions of the
    generator produced. Strict mode resolves missing headings to "".

    Example:
        parser = IssueParser()
        issue = parser.parse(os.environ["ISSUE_BODY"])
    """

    def __init__(self, headings: dict[str, str] | None = None, strict: bool = False):
        """Initialize the parser.

        Args:
            headings: Mapping of field name to heading line (default: HEADINGS)
            strict: Resolve missing headings to "" instead of the first line
        """
        self.headings = dict(HEADINGS if headings is None else headings)
        self.strict = strict

    def parse(self, issue_text: str) -> ParsedIssue:
        """Parse an issue body into a ParsedIssue.

        Never raises; missing headings produce fallback values.

        Args:
            issue_text: Raw issue body

        Returns:
            ParsedIssue with link, edition and date filled in
        """
        values = self.parse_fields(issue_text)
        return ParsedIssue(
            link=values.get("link", ""),
            edition=values.get("edition", ""),
            date=values.get("date", ""),
        )

    def parse_fields(self, issue_text: str) -> dict[str, str]:
        """Resolve every configured heading to a value."""
        lines = self._normalize(issue_text)
        index = self._index_lines(lines)

        values: dict[str, str] = {}
        for field_name, heading in self.headings.items():
            value = self.find_value(lines, index, heading)
            if value is None:
                logger.warning(f"Heading not found in issue body: {heading!r}")
                value = self._missing_value(lines)
            values[field_name] = value
        return values

    def find_value(
        self,
        lines: list[str],
        index: dict[str, int],
        heading: str,
    ) -> str | None:
        """Return the line following a heading.

        Args:
            lines: Normalized issue lines
            index: Heading line positions from _index_lines()
            heading: Exact heading line to look up

        Returns:
            The next line's text, "" if the heading is the last line,
            or None if the heading does not occur
        """
        position = index.get(heading)
        if position is None:
            return None
        if position + 1 < len(lines):
            return lines[position + 1]
        return ""

    def _missing_value(self, lines: list[str]) -> str:
        if self.strict or not lines:
            return ""
        return lines[0]

    @staticmethod
    def _normalize(issue_text: str) -> list[str]:
        stripped = (line.strip() for line in issue_text.split("\n"))
        return [line for line in stripped if line]

    @staticmethod
    def _index_lines(lines: list[str]) -> dict[str, int]:
        # First occurrence wins
        index: dict[str, int] = {}
        for position, line in enumerate(lines):
            index.setdefault(line, position)
        return index


def parse_issue(issue_text: str, strict: bool = False) -> ParsedIssue:
    """Parse an issue body with the default heading table."""
    return IssueParser(strict=strict).parse(issue_text)
