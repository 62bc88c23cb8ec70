"""Command-line interface for articles-loader."""

import argparse
import logging
import sys

from articles_loader.clients import DEFAULT_BASE_URL, DEFAULT_ENDPOINT, ClientError
from articles_loader.loader import ArticlesLoader
from articles_loader.status import (
    format_issue_period,
    format_issue_title,
    get_issue_badge_class,
    get_issue_status,
)

DEFAULT_TIMEOUT = 10


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> dict:
    return {
        "base_url": args.base_url,
        "endpoint": args.endpoint,
        "timeout": args.timeout,
        "headers": {
            "User-Agent": "articles-loader/1.0",
        },
    }


def list_issues(args: argparse.Namespace) -> int:
    """Execute the list-issues command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        with ArticlesLoader(build_config(args)) as loader:
            issues = loader.get_issues()
    except ClientError as e:
        logger.error(f"Failed to fetch issues: {e}")
        return 1

    logger.info(f"Found {len(issues)} issues")
    for issue in issues:
        print(
            f"{format_issue_title(issue)}\t{format_issue_period(issue) or ''}\t"
            f"{issue.article_count}\t{get_issue_status(issue)}"
        )

    return 0


def show_issue(args: argparse.Namespace) -> int:
    """Execute the show-issue command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        with ArticlesLoader(build_config(args)) as loader:
            issue = loader.get_issue(args.title)
    except ClientError as e:
        logger.error(f"Failed to fetch issues: {e}")
        return 1

    if issue is None:
        logger.error(f"Issue not found: {args.title}")
        return 1

    print(f"Title:    {format_issue_title(issue)}")
    print(f"Period:   {format_issue_period(issue) or ''}")
    print(f"Articles: {issue.article_count}")
    print(f"Status:   {get_issue_status(issue)}")
    print(f"Badge:    {get_issue_badge_class(issue)}")

    return 0


def add_endpoint_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_BASE_URL,
        help=f"Issues API base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--endpoint",
        type=str,
        default=DEFAULT_ENDPOINT,
        help="Issues API path (default: the published web app)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="articles-loader",
        description="Inspect magazine issues published by the articles API",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser(
        "list-issues",
        help="List all issues with their publish status",
        description="Fetch the issues document and print one line per issue: title, period, article count and status.",
    )
    add_endpoint_arguments(list_parser)
    list_parser.set_defaults(func=list_issues)

    show_parser = subparsers.add_parser(
        "show-issue",
        help="Show a single issue by exact title",
        description="Fetch the issues document and print the fields, status and badge class of the issue with the given title.",
    )
    show_parser.add_argument(
        "title",
        type=str,
        help="Exact (case-sensitive) issue title",
    )
    add_endpoint_arguments(show_parser)
    show_parser.set_defaults(func=show_issue)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
