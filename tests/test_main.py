"""End-to-end tests for the command line entry point."""

import json
from pathlib import Path

import pytest

from pysharp_reflector.domain.services.loading import SignatureLoader
from pysharp_reflector.main import main, parse_args, reflect_function

EXPECTED_SAMPLE_OUTPUT = [
    "add(long x, long y = 10, ValueTuple<PyObject>? args = null, "
    "IReadOnlyDictionary<string, PyObject>? kwargs = null)",
    "toggle(bool flag = true)",
    "configure(PyObject? opt = null)",
    'open_device(string devicePath, long mode = 0x1A4, long flags = 0b101, '
    'double timeout = 2.5, string label = "", long bufferSize = 4294967296L, '
    "IReadOnlyDictionary<string, PyObject>? options = null, "
    "IReadOnlyList<string>? @params = null)",
]


@pytest.fixture
def cli_env(clean_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, isolated_root_logger) -> Path:
    """Environment for running main() with logs and output under tmp_path."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    return tmp_path


def run_main(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.mark.unit
def test_parse_args() -> None:
    args = parse_args(["sigs.json", "-o", "out", "--function", "a,b", "--stdout", "-v"])

    assert args.signature_file == Path("sigs.json")
    assert args.output == Path("out")
    assert args.function == "a,b"
    assert args.stdout is True
    assert args.verbose is True
    assert args.log_dir is None


@pytest.mark.unit
def test_reflect_function(signature_file: Path) -> None:
    set_flags = SignatureLoader.load(signature_file)[1]

    assert reflect_function(set_flags) == "set_flags(long mask = 0xFF, long bits = 0b101)"


@pytest.mark.integration
def test_sample_file_is_written(cli_env: Path, project_root: Path) -> None:
    sample = project_root / "resources" / "sample-signatures.json"
    output_dir = cli_env / "out"

    assert run_main([str(sample), "-o", str(output_dir)]) == 0

    output_file = output_dir / "sample-signatures.params.cs"
    assert output_file.read_text(encoding="utf-8").splitlines() == EXPECTED_SAMPLE_OUTPUT
    assert list((cli_env / "logs").glob("pysharp_reflector_*.log"))


@pytest.mark.integration
def test_stdout_and_function_filter(cli_env: Path, signature_file: Path, capsys) -> None:
    assert run_main([str(signature_file), "--stdout", "--function", "set_flags"]) == 0

    out = capsys.readouterr().out
    assert "set_flags(long mask = 0xFF, long bits = 0b101)" in out
    assert "load_model(" not in out


@pytest.mark.integration
def test_unknown_function_fails(cli_env: Path, signature_file: Path) -> None:
    assert run_main([str(signature_file), "--stdout", "--function", "missing"]) == 1


@pytest.mark.integration
def test_missing_signature_file_is_configuration_error(cli_env: Path, capsys) -> None:
    assert run_main([str(cli_env / "nope.json")]) == 1

    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.integration
def test_malformed_signature_file_fails(cli_env: Path) -> None:
    path = cli_env / "bad.json"
    path.write_text(json.dumps({"functions": [{"name": "f", "parameters": [{"kind": "normal"}]}]}))

    assert run_main([str(path), "--stdout"]) == 1


@pytest.mark.integration
def test_failed_function_sets_exit_code(cli_env: Path, capsys) -> None:
    path = cli_env / "overflow.json"
    path.write_text(
        json.dumps(
            {
                "functions": [
                    {"name": "big", "parameters": [{"name": "n", "default": {"type": "integer", "value": 2**70}}]},
                    {"name": "small", "parameters": [{"name": "n", "default": {"type": "integer", "value": 1}}]},
                ]
            }
        )
    )

    assert run_main([str(path), "--stdout"]) == 1
    assert "small(PyObject n = 1)" in capsys.readouterr().out


@pytest.mark.integration
def test_fail_fast_stops_at_first_failure(
    cli_env: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    monkeypatch.setenv("PYSHARP_FAIL_FAST", "true")
    path = cli_env / "overflow.json"
    path.write_text(
        json.dumps(
            {
                "functions": [
                    {"name": "big", "parameters": [{"name": "n", "default": {"type": "integer", "value": 2**70}}]},
                    {"name": "small", "parameters": []},
                ]
            }
        )
    )

    assert run_main([str(path), "--stdout"]) == 1
    assert "small()" not in capsys.readouterr().out


@pytest.mark.integration
def test_log_dir_option(cli_env: Path, signature_file: Path) -> None:
    log_dir = cli_env / "cli-logs"

    assert run_main([str(signature_file), "--stdout", "--log-dir", str(log_dir)]) == 0

    assert list(log_dir.glob("pysharp_reflector_*.log"))
    assert not (cli_env / "logs").exists()


@pytest.mark.integration
def test_unpaired_surrogate_default_is_written_escaped(cli_env: Path) -> None:
    path = cli_env / "surrogate.json"
    path.write_text(
        json.dumps(
            {
                "functions": [
                    {
                        "name": "tag",
                        "parameters": [
                            {"name": "mark", "type": "str", "default": {"type": "string", "value": "\ud800"}}
                        ],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    output_dir = cli_env / "out"

    assert run_main([str(path), "-o", str(output_dir)]) == 0

    output_file = output_dir / "surrogate.params.cs"
    assert output_file.read_text(encoding="utf-8") == 'tag(string mark = "\\ud800")\n'
