"""Business logic for media item and media file deletion."""

import logging

from django.db import transaction
from django.dispatch import Signal

from server.apps.media.events import (
    DeleteMediaFileReason,
    MediaFileDeletedEvent,
    MediaItemDeletedEvent,
    media_file_deleted,
    media_item_deleted,
)
from server.apps.media.models import MediaFile, MediaItem

logger = logging.getLogger(__name__)


def get_media_item_path(media_item_id: int) -> str:
    """Get the root directory of a media item.

    Args:
        media_item_id: ID of the media item.

    Returns:
        Absolute root directory of the item.

    Raises:
        MediaItem.DoesNotExist: If the item is unknown.
    """
    return MediaItem.objects.values_list('path', flat=True).get(
        id=media_item_id,
    )


def delete_media_item(media_item_id: int) -> None:
    """Delete a media item with its media files and publish the event.

    Media files go away through the database cascade, so no per-file
    event is published for them.

    Args:
        media_item_id: ID of the media item to delete.

    Raises:
        MediaItem.DoesNotExist: If the item is unknown.
    """
    media_item = MediaItem.objects.get(id=media_item_id)
    event = MediaItemDeletedEvent(
        media_item_id=media_item.id,
        path=media_item.path,
    )

    with transaction.atomic():
        media_item.delete()

    logger.info(
        'Media item deleted: %s (ID: %d)',
        event.path,
        media_item_id,
    )
    _publish(media_item_deleted, event)


def delete_media_file(
    media_file_id: int,
    reason: DeleteMediaFileReason,
) -> None:
    """Delete a media file record and publish the event.

    The video file itself is handled by the caller; this only removes
    the record and lets subscribers clean up what depends on it.

    Args:
        media_file_id: ID of the media file to delete.
        reason: Why the file is being removed.

    Raises:
        MediaFile.DoesNotExist: If the file is unknown.
    """
    media_file = MediaFile.objects.get(id=media_file_id)
    event = MediaFileDeletedEvent(
        media_file_id=media_file.id,
        media_item_id=media_file.media_item_id,
        reason=reason,
    )

    with transaction.atomic():
        media_file.delete()

    logger.info(
        'Media file deleted: %s (ID: %d, reason: %s)',
        media_file.relative_path,
        media_file_id,
        reason.value,
    )
    _publish(media_file_deleted, event)


def _publish(
    signal: Signal,
    event: MediaItemDeletedEvent | MediaFileDeletedEvent,
) -> None:
    """Send an event to every subscriber.

    Subscribers run independently: one failing does not stop the others.
    Failures are logged here and are not raised to the deleting caller,
    since the deletion itself has already happened.

    Args:
        signal: Signal to send.
        event: Event passed to subscribers as ``event``.
    """
    responses = signal.send_robust(sender=type(event), event=event)
    for subscriber, response in responses:
        if isinstance(response, Exception):
            logger.error(
                'Subscriber %r failed handling %r',
                subscriber,
                event,
                exc_info=response,
            )
