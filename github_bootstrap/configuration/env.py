"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_bootstrap.configuration.models import DEFAULT_CONFIG_FILENAME


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"

    # Fallback for the --token option
    GitHubAccessToken: str | None = None

    # Label configuration file written by make-config and read by set-labels
    LABELS_CONFIG_PATH: Path = Path(DEFAULT_CONFIG_FILENAME)
