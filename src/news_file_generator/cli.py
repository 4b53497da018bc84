"""Command-line interface for news-file-generator."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from news_file_generator.hashing import hash_url
from news_file_generator.issues import IssueParser
from news_file_generator.pipeline import generate_news_file
from news_file_generator.pipeline.generator import DEFAULT_USER_AGENT

DEFAULT_OUTPUT_DIR = Path("./_news")
DEFAULT_IMAGES_DIR = Path("./images")
DEFAULT_TIMEOUT = 30.0
ISSUE_BODY_ENV = "ISSUE_BODY"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def read_issue_body(args: argparse.Namespace) -> str | None:
    """Read the issue body from --body-file, else from the environment.

    Returns:
        The issue body, or None (after logging why) when no usable body
        is available
    """
    logger = logging.getLogger(__name__)

    if args.body_file is not None:
        if not args.body_file.exists():
            logger.error(f"Issue body file not found: {args.body_file}")
            return None
        try:
            body = args.body_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read issue body file {args.body_file}: {e}")
            return None
    else:
        body = os.environ.get(ISSUE_BODY_ENV)

    if not body or not body.strip():
        logger.error(f"No issue body given: use --body-file or set {ISSUE_BODY_ENV}")
        return None
    return body


def generate(args: argparse.Namespace) -> int:
    """Execute the generate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    body = read_issue_body(args)
    if body is None:
        return 1

    client_config = {
        "timeout": args.timeout,
        "headers": {"User-Agent": DEFAULT_USER_AGENT},
    }

    try:
        path = generate_news_file(
            body,
            args.output,
            args.images,
            strict=args.strict,
            client_config=client_config,
        )
    except OSError as e:
        logger.error(f"Failed to generate news file: {e}")
        return 1

    logger.info(f"Generated news file: {path}")
    return 0


def parse(args: argparse.Namespace) -> int:
    """Execute the parse command.

    Prints the parsed fields and content hash as JSON without touching
    the network.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)

    body = read_issue_body(args)
    if body is None:
        return 1

    issue = IssueParser(strict=args.strict).parse(body)
    result = {
        "link": issue.link,
        "edition": issue.edition,
        "date": issue.date,
        "hash": hash_url(issue.link),
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def add_body_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the issue body options shared by all commands."""
    parser.add_argument(
        "--body-file",
        type=Path,
        default=None,
        help=f"File containing the issue body (default: ${ISSUE_BODY_ENV})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Leave fields empty when their heading is missing instead of using the first line",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="news-file-generator",
        description="Generate news appearance files from issue submissions",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Create a news file from an issue body",
        description="Parse a news appearance issue, download its cover image and favicon, and write a front matter document.",
    )
    add_body_arguments(generate_parser)
    generate_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for news files (default: {DEFAULT_OUTPUT_DIR})",
    )
    generate_parser.add_argument(
        "--images",
        type=Path,
        default=DEFAULT_IMAGES_DIR,
        help=f"Images directory for covers and icons (default: {DEFAULT_IMAGES_DIR})",
    )
    generate_parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    generate_parser.set_defaults(func=generate)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Print the fields parsed from an issue body",
        description="Parse a news appearance issue and print its link, edition, date and content hash as JSON.",
    )
    add_body_arguments(parse_parser)
    parse_parser.set_defaults(func=parse)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
