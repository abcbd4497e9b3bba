"""Resolved configuration passed between the CLI and the synchronization workflow."""

from dataclasses import dataclass, field

from github_bootstrap.schemas.labels import LabelConfigModel

DEFAULT_CONFIG_FILENAME = "config.json"
TOKEN_ENVIRONMENT_VARIABLE = "GitHubAccessToken"


@dataclass
class Credentials:
    """Identifies the target repository and the token used to act on it."""

    owner: str
    repo: str
    token: str = field(repr=False)


@dataclass
class SetLabelsConfig:
    """Configuration class for the set-labels command after validation."""

    credentials: Credentials
    label_config: LabelConfigModel
