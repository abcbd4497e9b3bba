"""Pydantic schemas for the label configuration file and GitHub label payloads."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

HEX_COLOR_PATTERN = re.compile(r"^#?[a-fA-F0-9]{3,6}$")
"""Pattern for a label color: 3 to 6 hex digits with an optional leading '#'."""


def normalize_color(color: str) -> str:
    """Return the color with exactly one leading '#'."""
    return color if color.startswith("#") else f"#{color}"


def strip_color(color: str) -> str:
    """Return the color without its leading '#', as the GitHub API expects it."""
    return color[1:] if color.startswith("#") else color


class LabelConfigModel(BaseModel):
    """Pydantic model for the label configuration file.

    Keys of ``labels`` are label names, values are hex colors. Colors are
    normalized to carry a leading '#' when the model is built.
    """

    labels: dict[str, str]

    @field_validator("labels")
    @classmethod
    def validate_colors(cls, labels: dict[str, str]) -> dict[str, str]:
        """Reject invalid hex colors and normalize the valid ones."""
        normalized: dict[str, str] = {}
        for name, color in labels.items():
            if not name:
                raise ValueError("Label names must not be empty")
            if not HEX_COLOR_PATTERN.match(color):
                raise ValueError(f"Label '{name}' has an invalid hex color '{color}'")
            normalized[name] = normalize_color(color)
        return normalized


class LabelPayload(BaseModel):
    """Request body for the create label endpoint."""

    name: str
    color: str

    @field_validator("color")
    @classmethod
    def drop_hash(cls, color: str) -> str:
        """GitHub expects the color without a leading '#'."""
        return strip_color(color)


class RemoteLabel(BaseModel):
    """Pydantic model for a label returned by the GitHub API."""

    model_config = ConfigDict(extra="allow")

    name: str
    color: str | None = None
    description: str | None = None
