"""Interactive questionnaire that writes the label configuration file."""

from pathlib import Path

import structlog
import typer

from github_bootstrap.configuration.exceptions import ConfigurationAbortedError, ConfigurationFileError
from github_bootstrap.schemas.labels import HEX_COLOR_PATTERN, LabelConfigModel, normalize_color
from github_bootstrap.utils.labels_file import dump_label_config_to_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def validate_hex_color(value: str) -> str:
    """Prompt value processor accepting 3 to 6 hex digits with an optional '#'."""
    value = value.strip()
    if not HEX_COLOR_PATTERN.match(value):
        raise typer.BadParameter(f"'{value}' is not a hex color (3 to 6 hex digits, optionally prefixed with '#')")
    return value


def confirm_config_creation(config_path: Path) -> bool:
    """Ask before overriding an existing configuration file.

    Returns True when the file does not exist yet or the user agrees to
    override it.
    """
    if not config_path.exists():
        return True
    return typer.confirm(
        f"{config_path.name} already exists in {config_path.parent.absolute()}. Would you like to proceed and override {config_path.name}?",
        default=False,
    )


def ask_label_definitions() -> list[tuple[str, str]]:
    """Ask how many labels to configure, then a name and hex value for each."""
    count: int = typer.prompt("How many labels would you like to configure?", type=int)
    while count < 0:
        typer.echo("Error: the number of labels cannot be negative", err=True)
        count = typer.prompt("How many labels would you like to configure?", type=int)

    definitions: list[tuple[str, str]] = []
    for index in range(1, count + 1):
        name: str = typer.prompt(f"Label {index} name")
        color: str = typer.prompt(f"Label {index} hex value", value_proc=validate_hex_color)
        definitions.append((name, color))
    return definitions


def build_label_config(definitions: list[tuple[str, str]]) -> LabelConfigModel:
    """Build a label configuration from (name, hex value) pairs.

    A repeated name keeps the last color given for it.
    """
    return LabelConfigModel(labels={name: normalize_color(color) for name, color in definitions})


def run_make_config_workflow(config_path: Path) -> str:
    """Run the questionnaire and write its answers to ``config_path``.

    Raises:
        ConfigurationAbortedError: If the user declined to override an existing file.
        ConfigurationFileError: If the file could not be written.

    Returns:
        str: The success message to show the user.
    """
    if not confirm_config_creation(config_path):
        raise ConfigurationAbortedError()

    label_config = build_label_config(ask_label_definitions())
    try:
        dump_label_config_to_file(label_config, config_path)
    except OSError as exc:
        raise ConfigurationFileError(config_path, f"file could not be written ({exc.strerror or exc})") from exc

    logger.info("Created label configuration file", path=str(config_path), label_count=len(label_config.labels))
    return f"Successfully created a {config_path.name} file!"
