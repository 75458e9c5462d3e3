"""Shared fixtures for media app tests."""

import pytest

from server.apps.media.models import MediaFile, MediaItem


@pytest.fixture
def media_item(db, tmp_path):
    """Create media item.

    Returns:
        MediaItem instance for testing.
    """
    return MediaItem.objects.create(
        title='Film',
        path=str(tmp_path / 'Film (2020)'),
    )


@pytest.fixture
def media_file(media_item):
    """Create media file of the media item.

    Returns:
        MediaFile instance for testing.
    """
    return MediaFile.objects.create(
        media_item=media_item,
        relative_path='Film (2020).mkv',
    )


@pytest.fixture
def received():
    """Record events delivered to a receiver.

    Returns:
        Tuple of (events list, receiver function).
    """
    events = []

    def _receiver(sender, event, **kwargs):
        events.append(event)

    return events, _receiver
