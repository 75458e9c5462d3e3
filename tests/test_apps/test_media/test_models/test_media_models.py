"""Tests for media models."""

from pathlib import Path

import pytest

from server.apps.media.models import MediaFile


@pytest.mark.django_db
def test_media_file_absolute_path(media_file, media_item):
    """Test media file resolves under the item root."""
    assert media_file.get_absolute_path() == (
        Path(media_item.path) / 'Film (2020).mkv'
    )


@pytest.mark.django_db
def test_media_item_str(media_item):
    """Test MediaItem __str__ method."""
    assert str(media_item) == f'Film ({media_item.path})'


@pytest.mark.django_db
def test_media_file_str(media_file):
    """Test MediaFile __str__ method."""
    assert str(media_file) == f'[{media_file.pk}] Film (2020).mkv'


@pytest.mark.django_db
def test_media_files_deleted_with_item(media_item, media_file):
    """Test media files are deleted when the item is deleted."""
    media_item.delete()

    assert not MediaFile.objects.exists()
