#!/usr/bin/env python3

"""Tuning flags for reflection and output, overridable from the environment."""

import os
from pathlib import Path

from ...utils.path_utils import create_output_filename

ENV_PREFIX = "PYSHARP_"

# Default configuration values
DEFAULT_CONFIG = {
    # Warn when a required parameter follows an optional one
    "CHECK_PARAMETER_ORDER": True,

    # Stop the batch at the first function that fails to reflect
    "FAIL_FAST": False,

    # Output file settings
    "OUTPUT_FILE_SUFFIX": ".params.cs",
    "LOG_FILE_PREFIX": "pysharp_reflector",
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is not None:
            # Convert to the type of the default
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            else:
                config[key] = env_value

    return config


def get_output_file_path(signature_file_path: Path, output_dir: Path) -> Path:
    """Get the output file path for a signature file.

    Args:
        signature_file_path: Path to the signature JSON file
        output_dir: Directory the rendered parameter lists are written to

    Returns:
        Path to output file
    """
    config = get_config()
    filename = create_output_filename(signature_file_path.stem, config["OUTPUT_FILE_SUFFIX"])
    return output_dir / filename
