"""Fixtures for unit tests."""

from typing import Any, Generator

import pytest
import structlog

from github_bootstrap.github.adapter import GitHubLabelsAdapter


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


class RecordingExecutor:
    """Stands in for GitHubRequestExecutor, recording calls and replaying canned outcomes.

    ``outcomes`` maps (method, url) to a value to return or an exception to
    raise. Calls without an entry return the request body for POST and None
    otherwise.
    """

    def __init__(self, outcomes: dict[tuple[str, str], Any] | None = None) -> None:
        """Initialize the executor with optional canned outcomes."""
        self.outcomes = outcomes or {}
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []

    async def call(self, method: str, url: str, body: dict[str, Any] | None = None) -> Any:
        """Record the call and replay its outcome."""
        self.calls.append((method, url, body))
        outcome = self.outcomes.get((method, url))
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is not None:
            return outcome
        if method == "POST":
            return dict(body or {})
        return None


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    """An executor with no canned outcomes."""
    return RecordingExecutor()


@pytest.fixture
def labels_adapter(recording_executor: RecordingExecutor) -> GitHubLabelsAdapter:
    """A labels adapter for acme/widgets backed by the recording executor."""
    return GitHubLabelsAdapter(recording_executor, "acme", "widgets")  # type: ignore[arg-type]
