"""Configuration dataclass for a natural-order sort run."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4


@dataclass
class SortConfig:
    """Configuration for one command-line sort run.

    Holds where lines come from, where they go and how they are ordered.
    """

    # Input files (read stdin if empty)
    inputs: list[Path] = field(default_factory=list)

    # Output file (write stdout if None)
    output: Path | None = None

    # Ordering options
    reverse: bool = False               # Descending natural order
    unique: bool = False                # Drop repeated lines, keep the first
    skip_blank: bool = False            # Drop empty / whitespace-only lines

    # Logging
    log_file: Path | None = None        # DEBUG log file (none if None)
    verbose: bool = False               # Show INFO messages on the console

    # Generated at runtime (do not set manually)
    run_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        self.inputs = [Path(p) if isinstance(p, str) else p for p in self.inputs]
        if isinstance(self.output, str):
            self.output = Path(self.output)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
