"""Main entry point for the pysharp signature reflector."""

import argparse
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from .domain.models.python import PythonFunction
from .domain.services.loading import SignatureLoader
from .domain.services.reflection import ArgumentReflection
from .infrastructure.config import Config, get_config, get_output_file_path
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Reflect Python function signatures into C# interop parameter lists",
        epilog="""
Examples:
  # Reflect every function in a signature file (writes output/<stem>.params.cs)
  python main.py signatures.json

  # Reflect selected functions only
  python main.py signatures.json --function load_model,predict

  # Print to the console instead of writing a file
  python main.py signatures.json --stdout

  # Verbose mode with debug logs
  python main.py signatures.json --verbose

  # Using .env file for configuration
  echo 'SIGNATURE_FILE_PATH=signatures.json' > .env
  python main.py
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "signature_file",
        type=Path,
        nargs="?",
        help="Path to the JSON signature file (optional if using .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory for reflected parameter lists (default: ./output)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for log files (default: ./logs)",
    )
    parser.add_argument(
        "--function",
        type=str,
        metavar="NAME",
        help="Reflect only the named function(s). "
        "Supports comma-separated list: 'load_model,predict'",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write reflected parameter lists to stdout instead of a file",
    )
    return parser.parse_args(argv)


def reflect_function(function: PythonFunction, check_order: bool = True) -> str:
    """Render one function as ``name(parameter list)``."""
    parameter_list = ArgumentReflection.parameter_list_syntax(
        function.parameters, check_order=check_order
    )
    return f"{function.name}{parameter_list.render()}"


@log_timing
def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point for signature reflection."""
    args = parse_args(argv)
    settings = get_config()

    try:
        config = Config.from_args(
            signature_file_path=args.signature_file,
            output_dir=args.output,
            verbose=args.verbose,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(
        config.log_dir, verbose=config.verbose, file_prefix=settings["LOG_FILE_PREFIX"]
    )
    logger = get_logger(__name__)

    logger.debug(f"Signature file: {config.signature_file_path}")
    logger.debug(f"Output directory: {config.output_dir}")

    try:
        functions = SignatureLoader.load(config.signature_file_path)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load signatures: {e}")
        sys.exit(1)

    if args.function:
        wanted = [name.strip() for name in args.function.split(",") if name.strip()]
        missing = [name for name in wanted if name not in {f.name for f in functions}]
        if missing:
            logger.error(f"Function(s) not found in signature file: {', '.join(missing)}")
            sys.exit(1)
        functions = [f for f in functions if f.name in wanted]

    if not functions:
        logger.error("No functions to reflect")
        sys.exit(1)

    logger.info(f"Reflecting {len(functions)} function(s)")

    rendered: list[str] = []
    failed_functions: list[tuple[str, str]] = []

    for i, function in enumerate(functions, 1):
        logger.debug(f"[{i}/{len(functions)}] Processing: {function.name}")
        try:
            rendered.append(reflect_function(function, check_order=settings["CHECK_PARAMETER_ORDER"]))
        except (NotImplementedError, OverflowError) as e:
            logger.error(f"[FAILED] {function.name}: {e}")
            failed_functions.append((function.name, str(e)))
            if config.verbose:
                traceback.print_exc()
            if settings["FAIL_FAST"]:
                break

    output = "\n".join(rendered) + "\n" if rendered else ""
    if args.stdout:
        sys.stdout.write(output)
    else:
        config.ensure_output_dir()
        output_file = get_output_file_path(config.signature_file_path, config.output_dir)
        output_file.write_text(output, encoding="utf-8")
        logger.info(f"[SUCCESS] Wrote: {output_file}")

    logger.info("=" * 70)
    logger.info("REFLECTION SUMMARY")
    logger.info("=" * 70)
    logger.info(f"Total functions: {len(functions)}")
    logger.info(f"Successfully reflected: {len(rendered)}")
    logger.info(f"Failed: {len(failed_functions)}")

    if failed_functions:
        logger.info("Failed functions:")
        for name, error in failed_functions:
            logger.info(f"  - {name}: {error}")

    sys.exit(0 if not failed_functions else 1)


if __name__ == "__main__":
    main()
