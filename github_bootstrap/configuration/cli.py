"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_bootstrap.configuration.env import Settings
from github_bootstrap.configuration.exceptions import RequiredConfigurationElementError
from github_bootstrap.configuration.wizard import run_make_config_workflow
from github_bootstrap.exceptions import GitHubBootstrapError
from github_bootstrap.synchronize.driver import run_set_labels_workflow
from github_bootstrap.utils.logging_config import configure_logging

load_dotenv()

typer_app = typer.Typer(
    help="A CLI for bootstrapping GitHub labels.",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)

ConfigFileOption = Annotated[
    Path | None,
    Option("--file", "-f", envvar="LABELS_CONFIG_PATH", help="Path to the label configuration file. Defaults to config.json."),
]
DebugOption = Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")]


def describe_missing_element(error: RequiredConfigurationElementError) -> str:
    """Tell the user where a missing configuration element can be provided."""
    sources: list[str] = []
    if error.cli_name:
        sources.append(f"command line option {error.cli_name}")
    if error.env_name:
        sources.append(f"environment variable {error.env_name}")
    return f"Provide the {error.name} with the " + " or the ".join(sources)


@typer_app.command(name="make-config")
def make_config_cli(
    config_file: ConfigFileOption = None,
    debug: DebugOption = False,
) -> None:
    """Create a label configuration file by answering a few questions."""
    settings = Settings()
    configure_logging(debug or settings.DEBUG)
    config_path = config_file or settings.LABELS_CONFIG_PATH

    try:
        message = run_make_config_workflow(config_path)
    except GitHubBootstrapError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc
    typer.echo(message)


@typer_app.command(name="set-labels")
def set_labels_cli(
    owner: Annotated[str | None, Option("--owner", "-o", help="GitHub repository owner name.")] = None,
    repo: Annotated[str | None, Option("--repo", "-r", help="GitHub repository name.")] = None,
    token: Annotated[
        str | None,
        Option("--token", "-t", help="GitHub access token with repo scopes. Falls back to the GitHubAccessToken environment variable."),
    ] = None,
    config_file: ConfigFileOption = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    timeout: Annotated[float | None, Option(help="Timeout in seconds for each GitHub API request.")] = None,
    debug: DebugOption = False,
) -> None:
    """Replace every label of a repository with the labels from the configuration file."""
    settings = Settings()
    configure_logging(debug or settings.DEBUG)

    result = asyncio.run(
        run_set_labels_workflow(
            owner=owner,
            repo=repo,
            token=token,
            env_token=settings.GitHubAccessToken,
            config_path=config_file or settings.LABELS_CONFIG_PATH,
            github_api_url=github_api_url or settings.GITHUB_API_URL,
            timeout=timeout,
        )
    )
    if not result.succeeded:
        typer.echo(result.message, err=True)
        if isinstance(result.error, RequiredConfigurationElementError):
            typer.echo(describe_missing_element(result.error), err=True)
        raise typer.Exit(1)
    typer.echo(result.message)


if __name__ == "__main__":
    typer_app()
