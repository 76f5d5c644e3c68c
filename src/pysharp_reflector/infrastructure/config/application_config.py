"""Configuration management for the signature reflector."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Configuration for the signature reflector."""

    signature_file_path: Path
    output_dir: Path
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        signature_file_path = Path(os.getenv("SIGNATURE_FILE_PATH", "signatures.json"))
        output_dir = Path(os.getenv("OUTPUT_DIR", "output"))
        log_dir = Path(os.getenv("LOG_DIR", "logs"))
        verbose = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

        return cls(
            signature_file_path=signature_file_path,
            output_dir=output_dir,
            verbose=verbose,
            log_dir=log_dir,
        )

    @classmethod
    def from_args(
        cls,
        signature_file_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            signature_file_path: Path to the signature JSON file (overrides env)
            output_dir: Output directory (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Log file directory (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if signature_file_path is not None:
            config.signature_file_path = signature_file_path
        if output_dir is not None:
            config.output_dir = output_dir
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.signature_file_path.exists():
            raise ValueError(f"Signature file not found: {self.signature_file_path}")

        if not self.signature_file_path.is_file():
            raise ValueError(f"Not a file: {self.signature_file_path}")

    def ensure_output_dir(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
