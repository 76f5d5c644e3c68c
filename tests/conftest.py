"""Pytest configuration and shared fixtures."""

import json
import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pysharp_reflector.domain.models.python import (
    ParameterKind,
    PythonConstant,
    PythonFunctionParameter,
    PythonTypeSpec,
)
from pysharp_reflector.infrastructure.config import Config
from pysharp_reflector.infrastructure.logging import LoggerSetup


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def int_type() -> PythonTypeSpec:
    return PythonTypeSpec("int")


@pytest.fixture
def mixed_parameters(int_type: PythonTypeSpec) -> list[PythonFunctionParameter]:
    """
    Parameters of ``def f(x: int, y: int = 10, *args, **kwargs)``.
    """
    return [
        PythonFunctionParameter("x", type=int_type),
        PythonFunctionParameter("y", type=int_type, default_value=PythonConstant.integer(10)),
        PythonFunctionParameter("args", ParameterKind.VARIADIC_POSITIONAL),
        PythonFunctionParameter("kwargs", ParameterKind.VARIADIC_KEYWORD),
    ]


@pytest.fixture
def signature_document() -> dict:
    """A signature file document covering every parameter kind."""
    return {
        "functions": [
            {
                "name": "load_model",
                "return_type": "Any",
                "parameters": [
                    {"name": "path", "type": "str"},
                    {"name": "/", "kind": "positional_only_marker"},
                    {
                        "name": "batch_size",
                        "type": "int",
                        "default": {"type": "integer", "value": 32},
                    },
                    {"name": "args", "kind": "variadic_positional"},
                    {"name": "device", "type": "str", "keyword_only": True},
                    {"name": "kwargs", "kind": "variadic_keyword"},
                ],
            },
            {
                "name": "set_flags",
                "parameters": [
                    {"name": "mask", "type": "int", "default": {"type": "hex_integer", "value": 255}},
                    {"name": "bits", "type": "int", "default": {"type": "bin_integer", "value": 5}},
                ],
            },
        ]
    }


@pytest.fixture
def signature_file(tmp_path: Path, signature_document: dict) -> Path:
    """Write the sample signature document to a temporary file."""
    path = tmp_path / "signatures.json"
    path.write_text(json.dumps(signature_document), encoding="utf-8")
    return path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Isolate configuration from the developer's environment.

    Runs the test from an empty directory (no .env) with no config variables set.
    """
    for name in ("SIGNATURE_FILE_PATH", "OUTPUT_DIR", "VERBOSE", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    for name in ("CHECK_PARAMETER_ORDER", "FAIL_FAST", "OUTPUT_FILE_SUFFIX", "LOG_FILE_PREFIX"):
        monkeypatch.delenv(f"PYSHARP_{name}", raising=False)
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def config(clean_env: Path) -> Config:
    """Load configuration from a clean environment."""
    return Config.from_env()


@pytest.fixture
def isolated_root_logger() -> Generator[None, None, None]:
    """Remove the handlers LoggerSetup installs and restore the root level."""
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
    root_logger.setLevel(saved_level)
