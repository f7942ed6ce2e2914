# =============================================================================
# core/services/sequence_store.py - Flat File Persistence
# =============================================================================
# Stores a single Fibonacci sequence as plain text in a directory on disk.
#
# There is no locking: concurrent writers overwrite each other and the
# last write wins. Errors from the filesystem are NOT translated here;
# callers decide whether a missing file or a failed write is reported.
# =============================================================================

import logging
from pathlib import Path

from core.models.sequence import FibonacciSequence

logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE_FILENAME = "fibonacci.txt"


class SequenceStore:
    """
    Read and write Fibonacci sequences as text files.

    Args:
        base_dir: Directory the named resources live in
        filename: Resource name used when writing
    """

    def __init__(
        self,
        base_dir: str | Path = ".",
        filename: str = DEFAULT_SEQUENCE_FILENAME,
    ):
        self.base_dir = Path(base_dir)
        self.filename = filename

    def write(self, sequence: FibonacciSequence) -> str:
        """
        Overwrite the stored resource with the sequence's text form.

        Args:
            sequence: Sequence to persist

        Returns:
            Name of the resource written

        Raises:
            OSError: If the file cannot be created or written
        """
        path = self.base_dir / self.filename
        path.write_text(sequence.to_text(), encoding="utf-8")

        logger.info(f"Stored sequence of {len(sequence)} values in {path}")
        return self.filename

    def read(self, filename: str) -> str:
        """
        Read a stored resource by name.

        Lines are joined without their line terminators.

        Args:
            filename: Resource name relative to base_dir

        Returns:
            File contents

        Raises:
            FileNotFoundError: If the resource does not exist
        """
        path = self.base_dir / filename
        with path.open(encoding="utf-8") as handle:
            content = "".join(line.rstrip("\r\n") for line in handle)

        logger.debug(f"Read {len(content)} characters from {path}")
        return content

    def is_writable(self) -> bool:
        """Check that the storage directory exists and accepts writes."""
        probe = self.base_dir / f".{self.filename}.probe"
        try:
            probe.write_text("", encoding="utf-8")
            probe.unlink()
        except OSError as e:
            logger.warning(f"Storage directory {self.base_dir} is not writable: {e}")
            return False
        return True
