"""Recoverable deletion of extra files through a recycle bin directory."""

import logging
import os
import shutil
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import final

from django.conf import settings
from django.utils import timezone

from server.apps.extras.infrastructure.disk import DiskProvider

logger = logging.getLogger(__name__)


def _recycle_timestamp() -> str:
    return datetime.now(tz=UTC).strftime('%Y%m%dT%H%M%S%f')


def _generate_recycled_name(path: Path, timestamp: str, index: int = 0) -> str:
    """Generate recycle bin filename with timestamp.

    Args:
        path: Original file path (e.g., '/movies/Film/Film.en.srt').
        timestamp: Moment of recycling.
        index: Counter appended when the plain name is taken.

    Returns:
        Name with timestamp (e.g., 'Film.en__20260131T143052123456.srt',
        or 'Film.en__20260131T143052123456_1.srt' for index 1).
    """
    counter = f'_{index}' if index else ''
    return f'{path.stem}__{timestamp}{counter}{path.suffix}'


def _free_destination(location: Path, path: Path) -> Path:
    """Pick a recycle bin path no other recycled file occupies.

    Args:
        location: Recycle bin directory.
        path: Original file path.

    Returns:
        Destination inside the recycle bin.
    """
    timestamp = _recycle_timestamp()
    index = 0
    destination = location / _generate_recycled_name(path, timestamp)
    while destination.exists():
        index += 1
        destination = location / _generate_recycled_name(path, timestamp, index)
    return destination


@final
class RecycleBinProvider:
    """Moves files into the configured recycle bin instead of erasing them.

    The location comes from ``EXTRAS_RECYCLE_BIN``. When it is not set,
    files are deleted permanently.
    """

    def __init__(
        self,
        disk_provider: DiskProvider | None = None,
        location: Path | None = None,
    ) -> None:
        """Initialize recycle bin.

        Args:
            disk_provider: Used for permanent deletion.
            location: Overrides the ``EXTRAS_RECYCLE_BIN`` setting.
        """
        self._disk_provider = disk_provider or DiskProvider()
        self._location = location

    @property
    def location(self) -> Path | None:
        """Recycle bin directory, or None when not configured."""
        if self._location is not None:
            return self._location
        configured = getattr(settings, 'EXTRAS_RECYCLE_BIN', '')
        return Path(configured) if configured else None

    def delete_file(self, path: Path) -> Path | None:
        """Move file into the recycle bin.

        The recycled copy gets a fresh modification time, so retention
        is counted from the deletion.

        Args:
            path: Absolute path of the file to recycle.

        Returns:
            Path inside the recycle bin, or None if the file was deleted
            permanently because no recycle bin is configured.

        Raises:
            OSError: If the file cannot be moved or deleted.
        """
        location = self.location
        if location is None:
            logger.info(
                'Recycle bin not configured, deleting permanently: %s',
                path,
            )
            self._disk_provider.delete_file(path)
            return None

        destination = location / path.name
        try:
            location.mkdir(parents=True, exist_ok=True)
            destination = _free_destination(location, path)
            shutil.move(path, destination)
            os.utime(destination)
        except OSError:
            logger.exception(
                'Failed to move file to recycle bin: %s -> %s',
                path,
                destination,
            )
            raise

        logger.info('File moved to recycle bin: %s -> %s', path, destination)
        return destination

    def list_expired(self, retention_days: int) -> list[Path]:
        """List recycled files older than the retention window.

        Args:
            retention_days: Days a recycled file is kept.

        Returns:
            Expired files, oldest first.
        """
        location = self.location
        if location is None or not location.is_dir():
            return []

        cutoff = (timezone.now() - timedelta(days=retention_days)).timestamp()
        expired = [
            (entry.stat().st_mtime, entry)
            for entry in location.iterdir()
            if entry.is_file()
        ]
        return [
            entry
            for modified, entry in sorted(expired)
            if modified <= cutoff
        ]
