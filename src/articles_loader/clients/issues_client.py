"""Client for the magazine's issues endpoint."""

import logging
from json import JSONDecodeError
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemas.issue import IssuesResponse

from .client import Client
from .exceptions import ApiError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://script.google.com"
DEFAULT_ENDPOINT = (
    "/macros/s/AKfycbwcq6COyb4e-Cr5XoUChvGNLwN6_vQAEEsJyuLg0q6coddgNynwkudjo24tMs5z7Whj/exec"
)


class IssuesClient(Client):
    """Client for the Apps Script web app that publishes issue data.

    The endpoint takes no query parameters and answers with a JSON object
    of the form ``{"success": bool, "error": str?, "issues": [...]}``.

    Config keys (in addition to those of Client):
        endpoint: URL path of the web app (default: the published exec URL)

    Example:
        config = {"base_url": "https://script.google.com"}
        with IssuesClient(config) as client:
            response = client.fetch()
    """

    @property
    def endpoint(self) -> str:
        return str(self._config.get("endpoint", DEFAULT_ENDPOINT))

    def fetch(self) -> IssuesResponse:
        """Fetch and validate the issues document.

        Returns:
            The validated IssuesResponse

        Raises:
            ConnectionError: If the network connection fails
            TransportError: If the endpoint returns a non-2xx response
            ValidationError: If the body is not JSON or fails schema validation
            ApiError: If the endpoint reports ``success: false``
        """
        response = self.get(self.endpoint)

        try:
            data = response.json()
        except (JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError(
                f"Response body is not valid JSON: {response.url}",
                errors=[str(e)],
            ) from e

        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected a JSON object, got {type(data).__name__}"
            )

        if not data.get("success"):
            raise ApiError(data.get("error"))

        return self._validate(data)

    def _validate(self, data: dict[str, Any]) -> IssuesResponse:
        """Validate the raw payload against the IssuesResponse schema.

        Raises:
            ValidationError: If the payload fails validation
        """
        try:
            validated = IssuesResponse.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                "Issues response failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

        logger.debug(f"Fetched {len(validated.issues)} issues from {self.endpoint}")
        return validated
