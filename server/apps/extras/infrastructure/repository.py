"""Database access for extra file records."""

import logging
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from django.db.models import QuerySet

from server.apps.extras.models import ExtraFile

TExtraFile = TypeVar('TExtraFile', bound=ExtraFile)

logger = logging.getLogger(__name__)


class ExtraFileRepository(Generic[TExtraFile]):
    """Storage for one kind of extra file, keyed by its owners.

    Lookups signal absence with an empty list or ``None``, never with
    an exception. Batch writes are only as atomic as the database makes
    a single bulk statement.
    """

    def __init__(self, model: type[TExtraFile]) -> None:
        """Initialize repository.

        Args:
            model: Concrete extra file model to store.
        """
        self._model = model
        # `added` is written once on insert and never updated
        self._update_fields = [
            field.name
            for field in model._meta.concrete_fields  # noqa: SLF001
            if not field.primary_key and field.name != 'added'
        ]

    @property
    def model(self) -> type[TExtraFile]:
        """Concrete model handled by this repository."""
        return self._model

    def get_files_by_media_item(self, media_item_id: int) -> list[TExtraFile]:
        """Get all extra files owned by a media item."""
        return list(self._queryset().filter(media_item_id=media_item_id))

    def get_files_by_media_file(self, media_file_id: int) -> list[TExtraFile]:
        """Get all extra files attached to a media file."""
        return list(self._queryset().filter(media_file_id=media_file_id))

    def find_by_path(
        self,
        relative_path: str,
        media_item_id: int | None = None,
    ) -> TExtraFile | None:
        """Find an extra file by its relative path.

        Args:
            relative_path: Path relative to the media item root.
            media_item_id: Optional owner to scope the lookup to.

        Returns:
            Matching record or None.
        """
        queryset = self._queryset().filter(relative_path=relative_path)
        if media_item_id is not None:
            queryset = queryset.filter(media_item_id=media_item_id)
        return queryset.first()

    def insert_many(self, extra_files: Sequence[TExtraFile]) -> None:
        """Insert new records in one batch."""
        if not extra_files:
            return

        for extra_file in extra_files:
            extra_file.fill_extension()

        self._queryset().bulk_create(extra_files)
        logger.debug(
            'Inserted %d %s records',
            len(extra_files),
            self._model.__name__,
        )

    def update_many(self, extra_files: Sequence[TExtraFile]) -> None:
        """Update existing records in one batch."""
        if not extra_files:
            return

        for extra_file in extra_files:
            extra_file.fill_extension()

        self._queryset().bulk_update(extra_files, self._update_fields)
        logger.debug(
            'Updated %d %s records',
            len(extra_files),
            self._model.__name__,
        )

    def delete(self, extra_file_id: int) -> int:
        """Delete a record by ID.

        Returns:
            Number of deleted records.
        """
        return self._delete(self._queryset().filter(id=extra_file_id))

    def delete_many(self, extra_file_ids: Iterable[int]) -> int:
        """Delete records by ID.

        Returns:
            Number of deleted records.
        """
        return self._delete(
            self._queryset().filter(id__in=list(extra_file_ids)),
        )

    def delete_for_media_item(self, media_item_id: int) -> int:
        """Delete every record owned by a media item.

        Returns:
            Number of deleted records.
        """
        return self._delete(
            self._queryset().filter(media_item_id=media_item_id),
        )

    def delete_for_media_file(self, media_file_id: int) -> int:
        """Delete every record attached to a media file.

        Returns:
            Number of deleted records.
        """
        return self._delete(
            self._queryset().filter(media_file_id=media_file_id),
        )

    def _queryset(self) -> QuerySet[TExtraFile]:
        return self._model._default_manager.all()  # noqa: SLF001

    def _delete(self, queryset: QuerySet[TExtraFile]) -> int:
        deleted, _ = queryset.delete()
        return deleted
