"""Label operations against a single GitHub repository."""

from typing import Any, Self
from urllib.parse import quote

import structlog
from pydantic import ValidationError

from github_bootstrap.configuration.models import Credentials
from github_bootstrap.github.client import DEFAULT_GITHUB_API_URL
from github_bootstrap.github.exceptions import MalformedResponseError
from github_bootstrap.github.executor import GitHubRequestExecutor
from github_bootstrap.schemas.labels import LabelPayload, RemoteLabel

logger = structlog.get_logger(__name__)


def parse_remote_label(data: Any) -> RemoteLabel:
    """Validate one label object returned by GitHub."""
    try:
        return RemoteLabel.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError(f"GitHub returned an unexpected label object: {exc.error_count()} validation error(s)") from exc


class GitHubLabelsAdapter:
    """Lists, deletes and creates the labels of one repository."""

    def __init__(self, executor: GitHubRequestExecutor, owner: str, repo_name: str) -> None:
        """Initialize the adapter with an already-initialized executor."""
        self.executor = executor
        self.owner = owner
        self.repo_name = repo_name

    @classmethod
    def create(
        cls,
        credentials: Credentials,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
        timeout: float | None = None,
    ) -> Self:
        """Create a new adapter for the repository named in ``credentials``."""
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=credentials.owner,
            repo_name=credentials.repo,
        )
        executor = GitHubRequestExecutor.create(
            owner=credentials.owner,
            github_token=credentials.token,
            github_api_url=github_api_url,
            timeout=timeout,
        )
        return cls(executor, credentials.owner, credentials.repo)

    @property
    def labels_url(self) -> str:
        """Path of the repository's label collection."""
        return f"/repos/{quote(self.owner, safe='')}/{quote(self.repo_name, safe='')}/labels"

    def label_url(self, name: str) -> str:
        """Path of a single label; the name is percent-encoded."""
        return f"{self.labels_url}/{quote(name, safe='')}"

    async def list_labels(self) -> list[RemoteLabel]:
        """List the first page of labels for the repository."""
        data = await self.executor.call("GET", self.labels_url)
        if not isinstance(data, list):
            raise MalformedResponseError("GitHub returned a label listing that is not a JSON array")
        return [parse_remote_label(item) for item in data]

    async def delete_label(self, name: str) -> None:
        """Delete a label for the repository."""
        await self.executor.call("DELETE", self.label_url(name))

    async def create_label(self, name: str, color: str) -> RemoteLabel:
        """Create a label for the repository; a leading '#' on the color is dropped."""
        payload = LabelPayload(name=name, color=color)
        data = await self.executor.call("POST", self.labels_url, body=payload.model_dump())
        return parse_remote_label(data)
