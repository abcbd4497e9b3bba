"""Issues single GitHub API requests and normalizes their outcome."""

from typing import Any, Literal, Self

import structlog
from githubkit import GitHub, Response
from githubkit.auth import TokenAuthStrategy
from githubkit.exception import RequestError, RequestFailed, RequestTimeout

from github_bootstrap.github.client import DEFAULT_GITHUB_API_URL, get_github_token_client
from github_bootstrap.github.exceptions import HttpStatusError, MalformedResponseError, TransportError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

HttpMethod = Literal["GET", "POST", "DELETE"]


def extract_error_message(response: Response[Any]) -> str:
    """Returns the ``message`` field of a GitHub error body.

    Raises:
        MalformedResponseError: If the body is not JSON or carries no message.
    """
    try:
        error_data = response.json()
    except ValueError as exc:
        raise MalformedResponseError(
            f"HTTP status code {response.status_code} returned an error body that is not valid JSON",
            status_code=response.status_code,
        ) from exc
    if not isinstance(error_data, dict) or not isinstance(error_data.get("message"), str):
        raise MalformedResponseError(
            f"HTTP status code {response.status_code} returned an error body without a message",
            status_code=response.status_code,
        )
    return error_data["message"]


class GitHubRequestExecutor:
    """Executes one authenticated request at a time against the GitHub API.

    Every outcome is one of: the parsed JSON body, ``None`` for a 204, or one
    of the errors from :mod:`github_bootstrap.github.exceptions`. Nothing is
    retried.
    """

    def __init__(self, client: GitHub[TokenAuthStrategy]) -> None:
        """Initialize the executor with an already-initialized client."""
        self.client = client

    @classmethod
    def create(
        cls,
        owner: str,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
        timeout: float | None = None,
    ) -> Self:
        """Create an executor whose requests identify themselves as ``owner``."""
        return cls(get_github_token_client(github_token, user_agent=owner, github_api_url=github_api_url, timeout=timeout))

    async def call(self, method: HttpMethod, url: str, body: dict[str, Any] | None = None) -> Any | None:
        """Send a request and return its parsed JSON body, or ``None`` for a 204.

        Raises:
            TransportError: If GitHub could not be reached or the call timed out.
            HttpStatusError: If GitHub answered with a status code above 299.
            MalformedResponseError: If a body could not be parsed as JSON.
        """
        logger.debug("Calling GitHub API", method=method, url=url)
        try:
            if body is None:
                response = await self.client.arequest(method, url)
            else:
                response = await self.client.arequest(method, url, json=body)
        except RequestFailed as exc:
            response = exc.response
        except (RequestError, RequestTimeout) as exc:
            logger.error("GitHub API request failed", method=method, url=url, error=str(exc))
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        if response.status_code > 299:
            message = extract_error_message(response)
            logger.error("GitHub API returned an error", method=method, url=url, status_code=response.status_code, message=message)
            raise HttpStatusError(response.status_code, message)

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"HTTP status code {response.status_code} returned a body that is not valid JSON",
                status_code=response.status_code,
            ) from exc
