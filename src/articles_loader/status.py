"""Display and publish-status helpers derived from an Issue."""

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from schemas.issue import Issue

logger = logging.getLogger(__name__)

PUBLISHED = "Published"
UPCOMING = "Upcoming"

BADGE_SUCCESS = "badge-success"
BADGE_UNDER = "badge-under"

MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

YEAR_PATTERN = re.compile(r"\d{4}")
RANGE_SEPARATORS = re.compile(r"[-–—]")
MONTH_PATTERNS = tuple(
    (number, re.compile(rf"(?<![a-z]){name}(?![a-z])"))
    for number, name in enumerate(MONTHS, start=1)
)


class ParseFailure(str, Enum):
    """Why a period string could not be resolved to an end date."""

    NO_YEAR = "no-year-found"
    NO_MONTH = "no-month-match"
    INVALID_DATE = "invalid-date"


@dataclass(frozen=True)
class PeriodParseResult:
    """Outcome of resolving a period string to its end date.

    Exactly one of end_date and reason is set.
    """

    end_date: date | None = None
    reason: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        return self.end_date is not None


def format_issue_title(issue: Issue) -> str:
    return issue.title


def format_issue_period(issue: Issue) -> str | None:
    return issue.period


def parse_period_end(period: str | None) -> PeriodParseResult:
    """Resolve a period string to the last day of its end month.

    "July–September 2025" resolves to 2025-09-30. The year is the first
    four-digit run; the end month is taken from the text after the first
    hyphen, en-dash or em-dash (or the whole string if there is none), and
    is the first month name, in calendar order, found there as a word.

    Args:
        period: Free-form period string

    Returns:
        PeriodParseResult with either the end date or a failure reason
    """
    if not isinstance(period, str):
        return PeriodParseResult(reason=ParseFailure.INVALID_DATE)

    year_match = YEAR_PATTERN.search(period)
    if not year_match:
        return PeriodParseResult(reason=ParseFailure.NO_YEAR)
    year = int(year_match.group())

    parts = RANGE_SEPARATORS.split(period.lower())
    end_month_text = parts[1].strip() if len(parts) > 1 else parts[0].strip()

    for month, pattern in MONTH_PATTERNS:
        if pattern.search(end_month_text):
            try:
                last_day = calendar.monthrange(year, month)[1]
                return PeriodParseResult(end_date=date(year, month, last_day))
            except ValueError:
                return PeriodParseResult(reason=ParseFailure.INVALID_DATE)

    return PeriodParseResult(reason=ParseFailure.NO_MONTH)


def parse_issue_period(period: str | None) -> date | None:
    """Return the end date of a period string, or None if it can't be parsed."""
    result = parse_period_end(period)
    if not result.ok:
        logger.debug(f"Could not parse period {period!r}: {result.reason.value}")
    return result.end_date


def get_issue_status(issue: Issue, today: date | None = None) -> str:
    """Classify an issue as "Published" or "Upcoming".

    An issue with articles is always published. An empty issue is upcoming
    until its period has ended, and upcoming if its period can't be parsed.

    Args:
        issue: The issue to classify
        today: Reference date (default: date.today())
    """
    if issue.article_count > 0:
        return PUBLISHED

    end_date = parse_issue_period(issue.period)
    if end_date is None:
        return UPCOMING

    if today is None:
        today = date.today()
    return UPCOMING if end_date > today else PUBLISHED


def get_issue_badge_class(issue: Issue, today: date | None = None) -> str:
    """Return the CSS badge class matching the issue's status."""
    if get_issue_status(issue, today) == PUBLISHED:
        return BADGE_SUCCESS
    return BADGE_UNDER
