"""Infrastructure configuration module."""

from .application_config import Config
from .reflection_config import get_config, get_output_file_path

__all__ = ["Config", "get_config", "get_output_file_path"]
