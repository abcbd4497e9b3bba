"""Contains utility functions for working with label configuration files."""

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from github_bootstrap.configuration.exceptions import ConfigurationFileError
from github_bootstrap.schemas.labels import LabelConfigModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_label_config_file(path: Path) -> LabelConfigModel:
    """Loads a label configuration file and validates its structure.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationFileError: If the file cannot be read, is not JSON, or
            does not describe a valid label configuration.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise ConfigurationFileError(path, f"file could not be read ({exc.strerror or exc})") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationFileError(path, f"file is not valid JSON ({exc.msg} at line {exc.lineno})") from exc

    try:
        label_config = LabelConfigModel.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationFileError(path, f"file does not describe a label configuration ({exc.error_count()} error(s))") from exc

    logger.debug("Loaded label configuration", path=str(path), label_count=len(label_config.labels))
    return label_config


def dump_label_config_to_file(label_config: LabelConfigModel, path: Path) -> None:
    """Dumps a label configuration to a JSON file indented by two spaces."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(label_config.model_dump(mode="json"), f, indent=2)
    logger.debug("Wrote label configuration", path=str(path), label_count=len(label_config.labels))
