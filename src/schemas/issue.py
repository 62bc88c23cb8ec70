"""Issue schemas for the articles endpoint payload."""

from pydantic import BaseModel, Field


class Issue(BaseModel):
    """One publication cycle of the magazine.

    Attributes:
        title: Issue title, used as its lookup key
        period: Free-form date range, e.g. "July–September 2025", if given
        article_count: Number of published articles in the issue
    """

    title: str
    period: str | None = None
    article_count: int = Field(default=0, ge=0, alias="articleCount")

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }


class IssuesResponse(BaseModel):
    """The JSON document returned by the articles endpoint."""

    success: bool
    error: str | None = None
    issues: list[Issue] = []

    model_config = {"extra": "allow"}
