"""Cached access to magazine issue data and display helpers."""

from .cache import CACHE_TTL_SECONDS, IssuesCache
from .loader import (
    ArticlesLoader,
    clear_cache,
    fetch_articles,
    get_default_loader,
    get_issue,
    get_issues,
)
from .status import (
    ParseFailure,
    PeriodParseResult,
    format_issue_period,
    format_issue_title,
    get_issue_badge_class,
    get_issue_status,
    parse_issue_period,
    parse_period_end,
)

__all__ = [
    "ArticlesLoader",
    "CACHE_TTL_SECONDS",
    "IssuesCache",
    "ParseFailure",
    "PeriodParseResult",
    "clear_cache",
    "fetch_articles",
    "format_issue_period",
    "format_issue_title",
    "get_default_loader",
    "get_issue",
    "get_issue_badge_class",
    "get_issue_status",
    "get_issues",
    "parse_issue_period",
    "parse_period_end",
]
