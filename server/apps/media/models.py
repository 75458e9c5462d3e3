"""Database models for media app."""

from pathlib import Path
from typing import Final, final, override

from django.db import models

_TITLE_MAX_LENGTH: Final = 255
_PATH_MAX_LENGTH: Final = 1024


@final
class MediaItem(models.Model):
    """Top-level media entity (a movie or a show).

    ``path`` is the item's root directory on disk. Every media file and
    extra file of the item is stored relative to it.
    """

    title = models.CharField(max_length=_TITLE_MAX_LENGTH)

    path = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        unique=True,
        help_text='Absolute root directory of the media item',
    )

    added = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Media Item'  # type: ignore[mutable-override]
        verbose_name_plural = 'Media Items'  # type: ignore[mutable-override]
        ordering = ['title']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.title} ({self.path})'


@final
class MediaFile(models.Model):
    """Video file belonging to a media item."""

    media_item = models.ForeignKey(
        MediaItem,
        on_delete=models.CASCADE,
        related_name='media_files',
        db_index=True,
    )

    relative_path = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        help_text='Path relative to the media item root directory',
    )

    size_bytes = models.BigIntegerField(default=0)

    added = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Media File'  # type: ignore[mutable-override]
        verbose_name_plural = 'Media Files'  # type: ignore[mutable-override]
        ordering = ['relative_path']

        constraints = [
            models.UniqueConstraint(
                fields=['media_item', 'relative_path'],
                name='media_file_item_path_unique',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'[{self.pk}] {self.relative_path}'

    def get_absolute_path(self) -> Path:
        """Resolve the file location on disk.

        Returns:
            Media item root joined with the relative path.
        """
        return Path(self.media_item.path) / self.relative_path
