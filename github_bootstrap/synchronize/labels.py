"""Contains synchronization logic for GitHub labels."""

import structlog

from github_bootstrap.github.adapter import GitHubLabelsAdapter
from github_bootstrap.schemas.labels import LabelConfigModel, RemoteLabel
from github_bootstrap.utils.queue import WorkQueue

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GITHUB_DEFAULT_PAGE_SIZE = 30
"""Number of labels GitHub returns on the first page when no page size is given."""


async def get_labels(github_adapter: GitHubLabelsAdapter) -> list[RemoteLabel]:
    """Fetch the labels currently present on the repository.

    Only the first page of results is read.
    """
    existing_labels = await github_adapter.list_labels()
    logger.info("Fetched existing labels", owner=github_adapter.owner, repo=github_adapter.repo_name, label_count=len(existing_labels))
    if len(existing_labels) >= GITHUB_DEFAULT_PAGE_SIZE:
        logger.warning(
            "Label listing filled a whole page, labels beyond the first page are not fetched",
            label_count=len(existing_labels),
        )
    return existing_labels


async def _delete_label(github_adapter: GitHubLabelsAdapter, name: str) -> None:
    logger.info("Deleting label", label_name=name)
    await github_adapter.delete_label(name)


async def delete_labels(github_adapter: GitHubLabelsAdapter, existing_labels: list[RemoteLabel]) -> list[None]:
    """Delete every given label, one request at a time.

    The first failing deletion stops the batch. Labels deleted before it stay
    deleted.
    """
    queue = WorkQueue(concurrency=1)
    for label in existing_labels:
        queue.defer(_delete_label, github_adapter, label.name)
    results = await queue.await_all()
    logger.info("Deleted existing labels", label_count=len(results))
    return results


async def _create_label(github_adapter: GitHubLabelsAdapter, name: str, color: str) -> RemoteLabel:
    logger.info("Creating label", label_name=name, color=color)
    return await github_adapter.create_label(name, color)


async def put_labels(github_adapter: GitHubLabelsAdapter, label_config: LabelConfigModel) -> list[RemoteLabel]:
    """Create one label per configuration entry, one request at a time.

    The first failing creation stops the batch. Labels created before it are
    kept.
    """
    queue = WorkQueue(concurrency=1)
    for name, color in label_config.labels.items():
        queue.defer(_create_label, github_adapter, name, color)
    results = await queue.await_all()
    logger.info("Created configured labels", label_count=len(results))
    return results
