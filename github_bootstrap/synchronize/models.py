"""Models shared by the label synchronization workflow."""

from dataclasses import dataclass, field
from enum import Enum

from github_bootstrap.configuration.models import Credentials
from github_bootstrap.schemas.labels import LabelConfigModel, RemoteLabel


class SyncState(str, Enum):
    """States of a set-labels run, in the order they are reached."""

    START = "start"
    VALIDATED = "validated"
    LISTED = "listed"
    DELETED = "deleted"
    CREATED = "created"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SyncContext:
    """Everything one synchronization run works on."""

    credentials: Credentials
    label_config: LabelConfigModel
    existing_labels: list[RemoteLabel] = field(default_factory=list)
