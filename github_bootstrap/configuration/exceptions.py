"""Contains exceptions raised when validating application configuration."""

from pathlib import Path

from github_bootstrap.exceptions import GitHubBootstrapError


class RequiredConfigurationElementError(GitHubBootstrapError):
    """Raised when a required configuration element is missing."""

    def __init__(self, message: str, name: str, cli_name: str | None = None, env_name: str | None = None) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(message)
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class MissingOwnerError(RequiredConfigurationElementError):
    """Raised when no repository owner was provided."""

    def __init__(self) -> None:
        """Initializes the exception for a missing owner."""
        super().__init__("owner is required", name="owner", cli_name="--owner")


class MissingRepoError(RequiredConfigurationElementError):
    """Raised when no repository name was provided."""

    def __init__(self) -> None:
        """Initializes the exception for a missing repository."""
        super().__init__("repo is required", name="repo", cli_name="--repo")


class MissingTokenError(RequiredConfigurationElementError):
    """Raised when neither an explicit token nor the environment fallback is set."""

    def __init__(self, env_name: str) -> None:
        """Initializes the exception for a missing access token."""
        super().__init__(f"--token or the {env_name} environment variable is required", name="token", cli_name="--token", env_name=env_name)


class MissingConfigError(RequiredConfigurationElementError):
    """Raised when no label configuration was supplied and none exists on disk."""

    def __init__(self, config_path: Path) -> None:
        """Initializes the exception with the path that was searched."""
        super().__init__(f"{config_path.name} file is required at {config_path.absolute()}", name="config", cli_name="--file")
        self.config_path = config_path


class ConfigurationFileError(GitHubBootstrapError):
    """Raised when the label configuration file exists but cannot be used."""

    def __init__(self, config_path: Path, reason: str) -> None:
        """Initializes the exception with the offending path and the reason."""
        super().__init__(f"Unable to load label configuration from {config_path}: {reason}")
        self.config_path = config_path
        self.reason = reason


class ConfigurationAbortedError(GitHubBootstrapError):
    """Raised when the user declines to override an existing configuration file."""

    def __init__(self) -> None:
        """Initializes the exception with the message shown to the user."""
        super().__init__("Aborted!")
