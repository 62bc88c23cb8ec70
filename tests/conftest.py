"""Pytest fixtures for Articles Loader tests."""

from unittest.mock import MagicMock

import pytest

from schemas.issue import IssuesResponse


def make_response(payload, status_code=200, is_success=True):
    """Create a mock httpx response carrying a JSON payload."""
    response = MagicMock()
    response.is_success = is_success
    response.status_code = status_code
    response.url = "https://script.google.com/macros/s/test/exec"
    response.json.return_value = payload
    return response


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(name="make_response")
def make_response_fixture():
    """Factory for mock httpx responses."""
    return make_response


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def issues_config():
    """Configuration for IssuesClient."""
    return {
        "base_url": "https://script.google.com",
        "endpoint": "/macros/s/test/exec",
    }


@pytest.fixture
def sample_issues_payload():
    """Sample issues document as returned by the Apps Script endpoint."""
    return {
        "success": True,
        "issues": [
            {
                "title": "Issue 1",
                "period": "January–March 2025",
                "articleCount": 6,
                "volume": 1,
            },
            {
                "title": "Issue 2",
                "period": "April-June 2025",
                "articleCount": 0,
            },
            {
                "title": "Issue 3",
                "period": "July—September 2099",
                "articleCount": 0,
            },
        ],
    }


@pytest.fixture
def sample_issues_response(sample_issues_payload):
    return IssuesResponse.model_validate(sample_issues_payload)
