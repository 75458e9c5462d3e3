"""Lifecycle of extra file records: upserts and cascading deletion.

One service instance handles one kind of extra file. It stamps and
routes records on upsert, and reacts to media deletion events by
removing the matching records and, for deleted media files, the extra
files on disk.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, Protocol

from django.conf import settings
from django.utils import timezone

from server.apps.extras.infrastructure.repository import (
    ExtraFileRepository,
    TExtraFile,
)
from server.apps.extras.models import ExtraFile
from server.apps.media.events import MediaFileDeletedEvent, MediaItemDeletedEvent

logger = logging.getLogger(__name__)

# Resolves a media item ID to the item's root directory
MediaItemPathResolver = Callable[[int], str]


class DeletionSink(Protocol):
    """Something that makes a file go away."""

    def delete_file(self, path: Path) -> object:
        """Remove or relocate the file at path."""


class FileSystem(DeletionSink, Protocol):
    """Disk access with permanent deletion."""

    def file_exists(self, path: Path) -> bool:
        """Check whether a file exists at path."""


@dataclass(frozen=True, slots=True)
class ExtraFilePolicy:
    """Per-kind behavior of the service.

    Attributes:
        kind: Name of the extra file kind (e.g., 'subtitle').
        permanently_delete: Skip the recycle bin when the owning media
            file is deleted.
    """

    kind: str
    permanently_delete: bool = False

    @classmethod
    def from_settings(cls, kind: str) -> 'ExtraFilePolicy':
        """Build the policy for kind from ``EXTRAS_PERMANENTLY_DELETE``.

        Args:
            kind: Name of the extra file kind.

        Returns:
            Policy for the kind, recycling by default.
        """
        configured = getattr(settings, 'EXTRAS_PERMANENTLY_DELETE', {})
        return cls(
            kind=kind,
            permanently_delete=bool(configured.get(kind, False)),
        )


class ExtraFileService(Generic[TExtraFile]):
    """Keeps extra file records in sync with their owning media.

    Holds no state between calls apart from its collaborators, so it is
    safe to share between threads as long as the database is.
    """

    def __init__(
        self,
        repository: ExtraFileRepository[TExtraFile],
        media_item_path: MediaItemPathResolver,
        disk_provider: FileSystem,
        recycle_bin: DeletionSink,
        policy: ExtraFilePolicy | Callable[[], ExtraFilePolicy],
    ) -> None:
        """Initialize service.

        Args:
            repository: Storage for this kind of extra file.
            media_item_path: Owning media lookup.
            disk_provider: Existence check and permanent deletion.
            recycle_bin: Recoverable deletion.
            policy: Per-kind behavior, or a callable returning it on
                every use so settings changes are picked up.
        """
        self._repository = repository
        self._media_item_path = media_item_path
        self._disk_provider = disk_provider
        self._recycle_bin = recycle_bin
        self._policy = policy

    @property
    def policy(self) -> ExtraFilePolicy:
        """Per-kind behavior of this service."""
        if callable(self._policy):
            return self._policy()
        return self._policy

    @property
    def permanently_delete(self) -> bool:
        """Whether extras skip the recycle bin on media file deletion."""
        return self.policy.permanently_delete

    def get_files_by_media_item(self, media_item_id: int) -> list[TExtraFile]:
        """Get all extra files owned by a media item."""
        return self._repository.get_files_by_media_item(media_item_id)

    def get_files_by_media_file(self, media_file_id: int) -> list[TExtraFile]:
        """Get all extra files attached to a media file."""
        return self._repository.get_files_by_media_file(media_file_id)

    def find_by_path(
        self,
        relative_path: str,
        media_item_id: int | None = None,
    ) -> TExtraFile | None:
        """Find an extra file by its path relative to the media item."""
        return self._repository.find_by_path(relative_path, media_item_id)

    def upsert(self, extra_files: TExtraFile | Iterable[TExtraFile]) -> None:
        """Insert new and update existing extra files.

        Every record gets the same ``last_updated`` timestamp. Records
        that were never persisted also get ``added`` and are inserted;
        the rest are updated. Records are not de-duplicated by path, so
        two unsaved records for one path are both inserted and the
        database unique constraint rejects the batch.

        Args:
            extra_files: One record or many.

        Raises:
            ValueError: If a record has a negative ID.
            django.db.Error: If the database rejects either batch.
        """
        if isinstance(extra_files, ExtraFile):
            extra_files = [extra_files]
        extra_files = list(extra_files)

        for extra_file in extra_files:
            if extra_file.pk is not None and extra_file.pk < 0:
                raise ValueError(
                    f'Invalid extra file ID {extra_file.pk}: {extra_file.relative_path}',
                )

        now = timezone.now()
        for extra_file in extra_files:
            extra_file.last_updated = now
            if not extra_file.is_persisted:
                # Zero is an unsaved ID too, but Django only skips None
                extra_file.pk = None
                extra_file.added = now

        new_files = [
            extra_file
            for extra_file in extra_files
            if extra_file.pk is None
        ]
        existing_files = [
            extra_file
            for extra_file in extra_files
            if extra_file.pk is not None
        ]

        self._repository.insert_many(new_files)
        self._repository.update_many(existing_files)

        logger.debug(
            'Upserted %s extra files: %d new, %d existing',
            self.policy.kind,
            len(new_files),
            len(existing_files),
        )

    def delete(self, extra_file_id: int) -> None:
        """Delete a record without touching the disk."""
        self._repository.delete(extra_file_id)

    def delete_many(self, extra_file_ids: Iterable[int]) -> None:
        """Delete records without touching the disk."""
        self._repository.delete_many(extra_file_ids)

    def handle_media_item_deleted(self, event: MediaItemDeletedEvent) -> None:
        """Forget every extra file of a deleted media item.

        The item directory is removed by the media system itself, so
        the disk is not touched here.

        Args:
            event: Deleted media item.
        """
        logger.debug(
            'Deleting %s extras from database for media item: %s',
            self.policy.kind,
            event.path,
        )
        self._repository.delete_for_media_item(event.media_item_id)

    def handle_media_file_deleted(self, event: MediaFileDeletedEvent) -> None:
        """Remove extra files of a deleted media file.

        Files that exist on disk are recycled, or deleted permanently
        when the policy says so; missing files are skipped. Records are
        removed afterwards in every case. When only the media file row
        goes away, the files on disk are left untouched.

        A fault while resolving the media item or touching the disk
        aborts the cascade before any record is removed.

        Args:
            event: Deleted media file.

        Raises:
            MediaItem.DoesNotExist: If the owning media item is unknown.
            OSError: If a file cannot be checked or deleted.
        """
        if event.reason.is_bookkeeping_only:
            logger.debug(
                'Removing media file %d from database as part of cleanup, '
                'not deleting %s extras from disk',
                event.media_file_id,
                self.policy.kind,
            )
        else:
            self._delete_from_disk(event)

        logger.debug(
            'Deleting %s extras from database for media file: %d',
            self.policy.kind,
            event.media_file_id,
        )
        self._repository.delete_for_media_file(event.media_file_id)

    def on_media_item_deleted(
        self,
        sender: type[Any],
        event: MediaItemDeletedEvent,
        **kwargs: object,
    ) -> None:
        """Signal receiver for ``media_item_deleted``."""
        self.handle_media_item_deleted(event)

    def on_media_file_deleted(
        self,
        sender: type[Any],
        event: MediaFileDeletedEvent,
        **kwargs: object,
    ) -> None:
        """Signal receiver for ``media_file_deleted``."""
        self.handle_media_file_deleted(event)

    def _delete_from_disk(self, event: MediaFileDeletedEvent) -> None:
        root = Path(self._media_item_path(event.media_item_id))
        sink = self._disk_provider if self.permanently_delete else self._recycle_bin

        for extra_file in self._repository.get_files_by_media_file(event.media_file_id):
            path = root / extra_file.relative_path

            if not self._disk_provider.file_exists(path):
                logger.debug('Extra file already gone: %s', path)
                continue

            sink.delete_file(path)
