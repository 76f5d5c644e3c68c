"""Utilities module initialization."""

from .path_utils import create_output_filename, sanitize_for_filesystem

__all__ = [
    "create_output_filename",
    "sanitize_for_filesystem",
]
