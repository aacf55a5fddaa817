"""CLI argument parsing and pre-flight validation."""

import argparse
import logging
import sys
from pathlib import Path

from natural_order.config import SortConfig
from natural_order.logging.logger import setup_logger
from natural_order.utils.validators import (
    ValidationError,
    validate_input_file,
    validate_output_file,
    validate_python_version,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse (sys.argv[1:] if None)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="natural_order",
        description="Sort lines in natural order (z9 before z10)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sort a file to stdout
  python -m natural_order names.txt

  # Sort stdin, descending, without duplicates
  ls | python -m natural_order --reverse --unique

  # Write to a file and keep a debug log
  python -m natural_order a.txt b.txt -o sorted.txt --log-file sort.log
        """
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        metavar="FILE",
        help="Files to read lines from (default: stdin)"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="File to write sorted lines to (default: stdout)"
    )

    # Ordering
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Sort in descending natural order"
    )
    parser.add_argument(
        "-u", "--unique",
        action="store_true",
        help="Drop repeated lines, keeping the first occurrence"
    )
    parser.add_argument(
        "--skip-blank",
        action="store_true",
        help="Drop empty and whitespace-only lines"
    )

    # Logging
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write a DEBUG log to this file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show progress messages on stderr"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SortConfig:
    """Build SortConfig from parsed arguments.

    Args:
        args: Parsed command-line arguments

    Returns:
        SortConfig instance
    """
    return SortConfig(
        inputs=args.inputs,
        output=args.output,
        reverse=args.reverse,
        unique=args.unique,
        skip_blank=args.skip_blank,
        log_file=args.log_file,
        verbose=args.verbose,
    )


def run_preflight_checks(config: SortConfig, logger: logging.Logger) -> None:
    """Run all pre-flight validation checks.

    Args:
        config: Sort configuration
        logger: Logger instance

    Raises:
        ValidationError: If any validation fails
    """
    validate_python_version()
    logger.debug(f"Python {sys.version_info.major}.{sys.version_info.minor}")

    for input_file in config.inputs:
        validate_input_file(input_file)
        logger.debug(f"Input file: {input_file}")

    if config.output is not None:
        validate_output_file(config.output)
        logger.debug(f"Output file: {config.output}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0=success, 1=validation error, 2=processing error, 3=output error)
    """
    try:
        args = parse_args(argv)
        config = build_config(args)
        logger = setup_logger(config.log_file, config.verbose)
        run_preflight_checks(config, logger)

        from natural_order.pipeline import SortRun
        return SortRun(config, logger).run()

    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"UNEXPECTED ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 2
