"""Validates the configuration of a set-labels run before any network call."""

from pathlib import Path

import structlog

from github_bootstrap.configuration.exceptions import (
    MissingConfigError,
    MissingOwnerError,
    MissingRepoError,
    MissingTokenError,
)
from github_bootstrap.configuration.models import (
    DEFAULT_CONFIG_FILENAME,
    TOKEN_ENVIRONMENT_VARIABLE,
    Credentials,
    SetLabelsConfig,
)
from github_bootstrap.schemas.labels import LabelConfigModel
from github_bootstrap.utils.labels_file import load_label_config_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def resolve_github_token(token: str | None, env_token: str | None) -> str:
    """Returns the explicit token, falling back to the environment value.

    Raises:
        MissingTokenError: If neither token is set.
    """
    if token:
        return token
    if env_token:
        logger.debug("Using access token from environment", env_name=TOKEN_ENVIRONMENT_VARIABLE)
        return env_token
    raise MissingTokenError(TOKEN_ENVIRONMENT_VARIABLE)


async def validate_set_labels_configuration(
    owner: str | None,
    repo: str | None,
    token: str | None,
    env_token: str | None = None,
    label_config: LabelConfigModel | None = None,
    config_path: Path = Path(DEFAULT_CONFIG_FILENAME),
) -> SetLabelsConfig:
    """Validates the inputs of a set-labels run.

    Checks happen in a fixed order (owner, repo, token, label configuration)
    and only the first missing element is reported.

    Args:
        owner (str | None): The repository owner.
        repo (str | None): The repository name.
        token (str | None): The access token given on the command line.
        env_token (str | None): The access token read from the environment.
        label_config (LabelConfigModel | None): An already built label
            configuration. When omitted, ``config_path`` is loaded.
        config_path (Path): Location of the label configuration file.

    Raises:
        MissingOwnerError: If the owner is missing.
        MissingRepoError: If the repository is missing.
        MissingTokenError: If no token is available.
        MissingConfigError: If no configuration was given and the file does not exist.
        ConfigurationFileError: If the configuration file exists but is unusable.

    Returns:
        SetLabelsConfig: The validated configuration.
    """
    if not owner:
        raise MissingOwnerError()
    if not repo:
        raise MissingRepoError()
    effective_token = await resolve_github_token(token, env_token)

    if label_config is None:
        try:
            label_config = load_label_config_file(config_path)
        except FileNotFoundError as exc:
            raise MissingConfigError(config_path) from exc

    logger.info("Validated set-labels configuration", owner=owner, repo=repo, label_count=len(label_config.labels))
    return SetLabelsConfig(
        credentials=Credentials(owner=owner, repo=repo, token=effective_token),
        label_config=label_config,
    )
