"""Utility modules for shared functionality."""

from .labels_file import dump_label_config_to_file, load_label_config_file
from .logging_config import configure_logging
from .queue import WorkQueue

__all__ = [
    "WorkQueue",
    "configure_logging",
    "dump_label_config_to_file",
    "load_label_config_file",
]
