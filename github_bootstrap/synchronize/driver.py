"""Orchestrates the synchronization of GitHub labels."""

import time
from functools import partial
from pathlib import Path
from typing import Callable

import structlog

from github_bootstrap.configuration.models import DEFAULT_CONFIG_FILENAME, Credentials
from github_bootstrap.configuration.reconcile import validate_set_labels_configuration
from github_bootstrap.exceptions import GitHubBootstrapError
from github_bootstrap.github.adapter import GitHubLabelsAdapter
from github_bootstrap.github.client import DEFAULT_GITHUB_API_URL
from github_bootstrap.schemas.labels import LabelConfigModel, RemoteLabel
from github_bootstrap.synchronize.labels import delete_labels, get_labels, put_labels
from github_bootstrap.synchronize.models import SyncContext, SyncState
from github_bootstrap.synchronize.results import SET_LABELS_SUCCESS_MESSAGE, SetLabelsResult
from github_bootstrap.utils.queue import WorkQueue

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

AdapterFactory = Callable[[Credentials], GitHubLabelsAdapter]


async def run_set_labels_workflow(
    owner: str | None,
    repo: str | None,
    token: str | None,
    env_token: str | None = None,
    label_config: LabelConfigModel | None = None,
    config_path: Path = Path(DEFAULT_CONFIG_FILENAME),
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    timeout: float | None = None,
    adapter_factory: AdapterFactory | None = None,
) -> SetLabelsResult:
    """Run the set-labels workflow: validate, list, delete every label, create the configured ones.

    The run moves through START, VALIDATED, LISTED, DELETED, CREATED and DONE.
    The first error raised by any step ends the run in FAILED; nothing is
    retried and nothing already deleted or created is rolled back.

    Args:
        owner: Repository owner, also sent as the User-Agent.
        repo: Repository name.
        token: Access token given on the command line.
        env_token: Access token read from the environment, used when ``token`` is empty.
        label_config: Label configuration to apply. When omitted it is loaded from ``config_path``.
        config_path: Location of the label configuration file.
        github_api_url: Base URL of the GitHub REST API.
        timeout: Optional timeout in seconds for each request.
        adapter_factory: Builds the labels adapter from validated credentials.

    Returns:
        SetLabelsResult: DONE with a success message, or FAILED with the first error.
    """
    if adapter_factory is None:
        adapter_factory = partial(GitHubLabelsAdapter.create, github_api_url=github_api_url, timeout=timeout)

    state = SyncState.START
    deleted_labels: list[str] = []
    created_labels: list[RemoteLabel] = []
    start_time = time.time()

    try:
        config = await validate_set_labels_configuration(
            owner=owner,
            repo=repo,
            token=token,
            env_token=env_token,
            label_config=label_config,
            config_path=config_path,
        )
        state = SyncState.VALIDATED

        github_adapter = adapter_factory(config.credentials)
        context = SyncContext(credentials=config.credentials, label_config=config.label_config)
        context.existing_labels = await get_labels(github_adapter)
        state = SyncState.LISTED

        async def delete_step() -> None:
            nonlocal state
            await delete_labels(github_adapter, context.existing_labels)
            deleted_labels.extend(label.name for label in context.existing_labels)
            state = SyncState.DELETED

        async def create_step() -> None:
            nonlocal state
            created_labels.extend(await put_labels(github_adapter, context.label_config))
            state = SyncState.CREATED

        # Deletion must finish before the first creation request is sent.
        queue = WorkQueue(concurrency=1)
        queue.defer(delete_step)
        queue.defer(create_step)
        await queue.await_all()
    except GitHubBootstrapError as exc:
        logger.error("Label synchronization failed", failed_state=state.value, error=str(exc))
        return SetLabelsResult(
            SyncState.FAILED,
            str(exc),
            error=exc,
            failed_state=state,
            deleted_labels=deleted_labels,
            created_labels=created_labels,
        )

    logger.info(
        "Synchronized labels",
        owner=config.credentials.owner,
        repo=config.credentials.repo,
        deleted_count=len(deleted_labels),
        created_count=len(created_labels),
        duration=round(time.time() - start_time, 2),
    )
    return SetLabelsResult(
        SyncState.DONE,
        SET_LABELS_SUCCESS_MESSAGE,
        deleted_labels=deleted_labels,
        created_labels=created_labels,
    )
