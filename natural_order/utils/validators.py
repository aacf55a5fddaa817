"""Pre-flight validation checks for a sort run."""

import sys
from pathlib import Path


class ValidationError(Exception):
    """Raised when validation fails (exit code 1)."""
    pass


def validate_python_version() -> None:
    """Check that Python version is >= 3.10.

    Raises:
        ValidationError: If Python version is too old
    """
    version_info = sys.version_info
    if version_info < (3, 10):
        raise ValidationError(
            f"Python 3.10+ required, but running {version_info.major}.{version_info.minor}"
        )


def validate_input_file(input_file: Path) -> None:
    """Check that an input file exists and is readable.

    Args:
        input_file: Path to input file

    Raises:
        ValidationError: If file doesn't exist, isn't a file or isn't readable
    """
    if not input_file.exists():
        raise ValidationError(f"Input file not found: {input_file}")

    if not input_file.is_file():
        raise ValidationError(f"Input path is not a file: {input_file}")

    try:
        with open(input_file, "rb"):
            pass
    except PermissionError:
        raise ValidationError(f"Input file not readable: {input_file}")


def validate_output_file(output_file: Path) -> None:
    """Check that the output file can be written (create parent if needed).

    Args:
        output_file: Path to output file

    Raises:
        ValidationError: If the path is a directory or its parent isn't writable
    """
    if output_file.is_dir():
        raise ValidationError(f"Output path is a directory: {output_file}")

    output_dir = output_file.parent
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        raise ValidationError(f"Cannot create output directory: {output_dir}")

    # Try to create a test file to verify writability
    test_file = output_dir / ".write_test"
    try:
        test_file.touch()
        test_file.unlink()
    except PermissionError:
        raise ValidationError(f"Output directory not writable: {output_dir}")
