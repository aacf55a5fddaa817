"""Sort run orchestration: read, sort, write."""

import logging
import sys
import time

from natural_order.config import SortConfig
from natural_order.core.segment import NumberOverflowError
from natural_order.utils.natural_sort import natural_sort
from natural_order.utils.validators import ValidationError


class OutputError(Exception):
    """Raised when output operations fail (exit code 3)."""
    pass


def _strip_newline(line: str) -> str:
    """Drop one trailing line terminator, leaving other whitespace alone."""
    return line.removesuffix("\n").removesuffix("\r")


def read_lines(config: SortConfig, logger: logging.Logger) -> list[str]:
    """Read lines from the configured inputs (stdin if none).

    Args:
        config: Sort configuration
        logger: Logger instance

    Returns:
        Lines without trailing newlines, in input order

    Raises:
        ValidationError: If stdin or an input file can't be decoded
    """
    lines = []

    if not config.inputs:
        logger.info("Reading from stdin")
        try:
            lines.extend(_strip_newline(line) for line in sys.stdin)
        except UnicodeDecodeError as e:
            raise ValidationError(f"stdin could not be decoded: {e}")
    else:
        for input_file in config.inputs:
            logger.info(f"Reading {input_file}")
            try:
                with open(input_file, "r", encoding="utf-8") as f:
                    lines.extend(_strip_newline(line) for line in f)
            except UnicodeDecodeError as e:
                raise ValidationError(f"{input_file} is not valid UTF-8: {e}")

    if config.skip_blank:
        before = len(lines)
        lines = [line for line in lines if line.strip()]
        logger.debug(f"Skipped {before - len(lines)} blank line(s)")

    if config.unique:
        before = len(lines)
        lines = list(dict.fromkeys(lines))
        logger.debug(f"Dropped {before - len(lines)} duplicate line(s)")

    return lines


def write_lines(lines: list[str], config: SortConfig, logger: logging.Logger) -> None:
    """Write lines to the configured output (stdout if none).

    Raises:
        OutputError: If the output file can't be written
    """
    if config.output is None:
        for line in lines:
            sys.stdout.write(f"{line}\n")
        sys.stdout.flush()
        return

    try:
        with open(config.output, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(f"{line}\n")
    except OSError as e:
        raise OutputError(f"Failed to write {config.output}: {e}")

    logger.info(f"Wrote {len(lines)} line(s) to {config.output}")


class SortRun:
    """Orchestrates one read -> sort -> write run."""

    def __init__(self, config: SortConfig, logger: logging.Logger):
        """Initialize run.

        Args:
            config: Sort configuration
            logger: Logger instance
        """
        self.config = config
        self.logger = logger

    def run(self) -> int:
        """Run the sort.

        Returns:
            Exit code (0=success, 1=validation error, 2=processing error, 3=output error)
        """
        self.logger.info(f"Run ID: {self.config.run_id}")
        self.logger.info(f"Timestamp: {self.config.timestamp}")

        try:
            start_time = time.time()
            lines = read_lines(self.config, self.logger)
            self.logger.info(
                f"Read {len(lines)} line(s) in {time.time() - start_time:.3f}s"
            )

            start_time = time.time()
            ordered = natural_sort(lines, reverse=self.config.reverse)
            self.logger.info(
                f"Sorted {len(ordered)} line(s) in {time.time() - start_time:.3f}s"
            )

            write_lines(ordered, self.config, self.logger)
            return 0

        except ValidationError as e:
            self.logger.error(f"Validation error: {e}")
            return 1

        except NumberOverflowError as e:
            self.logger.error(f"Processing error: {e}")
            return 2

        except OutputError as e:
            self.logger.error(f"Output error: {e}")
            return 3
