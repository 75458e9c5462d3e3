"""Shared fixtures for extras app tests."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from server.apps.extras.infrastructure.disk import DiskProvider
from server.apps.extras.infrastructure.recycle_bin import RecycleBinProvider
from server.apps.extras.infrastructure.repository import ExtraFileRepository
from server.apps.extras.logic.extra_file_service import (
    ExtraFilePolicy,
    ExtraFileService,
)
from server.apps.extras.models import MetadataFile, SubtitleFile
from server.apps.media.logic.media_operations import get_media_item_path
from server.apps.media.models import MediaFile, MediaItem


@pytest.fixture
def media_item(db, tmp_path):
    """Create media item with its root directory on disk.

    Returns:
        MediaItem instance for testing.
    """
    root = tmp_path / 'movies' / 'Film (2020)'
    root.mkdir(parents=True)
    return MediaItem.objects.create(title='Film', path=str(root))


@pytest.fixture
def other_media_item(db, tmp_path):
    """Create second media item for isolation tests.

    Returns:
        Second MediaItem instance.
    """
    root = tmp_path / 'movies' / 'Other (2021)'
    root.mkdir(parents=True)
    return MediaItem.objects.create(title='Other', path=str(root))


@pytest.fixture
def media_file(media_item):
    """Create media file of the media item.

    Returns:
        MediaFile instance for testing.
    """
    return MediaFile.objects.create(
        media_item=media_item,
        relative_path='Film (2020).mkv',
        size_bytes=1024,
    )


@pytest.fixture
def recycle_bin_dir(tmp_path) -> Path:
    """Recycle bin location (not created up front).

    Returns:
        Path of the recycle bin directory.
    """
    return tmp_path / 'recycle'


@pytest.fixture
def disk_provider():
    """Real disk provider with call recording.

    Returns:
        Mock wrapping a DiskProvider.
    """
    return Mock(wraps=DiskProvider())


@pytest.fixture
def recycle_bin(disk_provider, recycle_bin_dir):
    """Real recycle bin with call recording.

    Returns:
        Mock wrapping a RecycleBinProvider.
    """
    return Mock(wraps=RecycleBinProvider(disk_provider, recycle_bin_dir))


@pytest.fixture
def subtitle_service(disk_provider, recycle_bin):
    """Subtitle service that recycles deleted extras.

    Returns:
        ExtraFileService for SubtitleFile.
    """
    return ExtraFileService(
        repository=ExtraFileRepository(SubtitleFile),
        media_item_path=get_media_item_path,
        disk_provider=disk_provider,
        recycle_bin=recycle_bin,
        policy=ExtraFilePolicy(kind='subtitle'),
    )


@pytest.fixture
def metadata_service(disk_provider, recycle_bin):
    """Metadata service that deletes extras permanently.

    Returns:
        ExtraFileService for MetadataFile.
    """
    return ExtraFileService(
        repository=ExtraFileRepository(MetadataFile),
        media_item_path=get_media_item_path,
        disk_provider=disk_provider,
        recycle_bin=recycle_bin,
        policy=ExtraFilePolicy(kind='metadata', permanently_delete=True),
    )


@pytest.fixture
def write_extra(media_item):
    """Write a file under the media item root.

    Returns:
        Function taking a relative path and returning the absolute path.
    """
    def _write(relative_path: str) -> Path:
        path = Path(media_item.path) / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('1\n00:00:01,000 --> 00:00:02,000\nHello\n')
        return path

    return _write
