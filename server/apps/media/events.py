"""Domain events published when media is deleted.

Django signals act as the event bus. Each signal is sent with a single
``event`` keyword argument holding one of the dataclasses below::

    @receiver(media_file_deleted)
    def on_media_file_deleted(sender, event, **kwargs):
        ...
"""

import enum
from dataclasses import dataclass

from django.dispatch import Signal


@enum.unique
class DeleteMediaFileReason(enum.Enum):
    """Why a media file record is being removed."""

    MISSING_FROM_DISK = 'missing_from_disk'
    MANUAL = 'manual'
    UPGRADE = 'upgrade'
    NO_LINKED_ITEMS = 'no_linked_items'
    MANUAL_OVERRIDE = 'manual_override'

    @property
    def is_bookkeeping_only(self) -> bool:
        """Whether only the database row goes away.

        The physical file is still in place in that case, so anything
        next to it on disk must be left alone.
        """
        return self is DeleteMediaFileReason.NO_LINKED_ITEMS


@dataclass(frozen=True, slots=True)
class MediaItemDeletedEvent:
    """A media item and all of its media files were deleted."""

    media_item_id: int
    path: str


@dataclass(frozen=True, slots=True)
class MediaFileDeletedEvent:
    """A single media file record was deleted."""

    media_file_id: int
    media_item_id: int
    reason: DeleteMediaFileReason


media_item_deleted = Signal()
media_file_deleted = Signal()
