"""Local file system access for extra files."""

import logging
import stat
from pathlib import Path
from typing import final

logger = logging.getLogger(__name__)


@final
class DiskProvider:
    """Existence check and permanent deletion on the local disk.

    Missing files are reported as such; any other OS error propagates.
    """

    def file_exists(self, path: Path) -> bool:
        """Check whether a regular file exists at path.

        Args:
            path: Absolute file path.

        Returns:
            True if a regular file is present.

        Raises:
            OSError: On I/O faults other than the file being absent.
        """
        try:
            file_stat = path.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        return stat.S_ISREG(file_stat.st_mode)

    def delete_file(self, path: Path) -> None:
        """Remove file permanently.

        Args:
            path: Absolute file path.

        Raises:
            OSError: If the file cannot be removed, including when it is
                already gone.
        """
        try:
            logger.info('Deleting file from disk: %s', path)
            path.unlink()
        except OSError:
            logger.exception('Failed to delete file from disk: %s', path)
            raise
