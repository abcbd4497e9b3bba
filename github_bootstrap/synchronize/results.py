"""Contains results of the set-labels workflow."""

from github_bootstrap.schemas.labels import RemoteLabel
from github_bootstrap.synchronize.models import SyncState

SET_LABELS_SUCCESS_MESSAGE = "Successfully created labels!"


class SetLabelsResult:
    """Contains the outcome of one set-labels run.

    ``deleted_labels`` and ``created_labels`` are only filled for batches that
    completed; a batch that failed part way leaves its list empty.
    """

    def __init__(
        self,
        state: SyncState,
        message: str,
        error: Exception | None = None,
        failed_state: SyncState | None = None,
        deleted_labels: list[str] | None = None,
        created_labels: list[RemoteLabel] | None = None,
    ) -> None:
        """Initialize the result with the terminal state and a human-readable message."""
        self.state = state
        self.message = message
        self.error = error
        self.failed_state = failed_state
        self.deleted_labels = deleted_labels or []
        self.created_labels = created_labels or []

    @property
    def succeeded(self) -> bool:
        """Whether the run reached the DONE state."""
        return self.state == SyncState.DONE
