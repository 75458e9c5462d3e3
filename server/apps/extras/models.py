"""Database models for extras app."""

from pathlib import PurePath
from typing import Final, final, override

from django.db import models

# Constants for field max lengths
_PATH_MAX_LENGTH: Final = 1024
_EXTENSION_MAX_LENGTH: Final = 32
_LANGUAGE_MAX_LENGTH: Final = 64
_CONSUMER_MAX_LENGTH: Final = 128
_HASH_MAX_LENGTH: Final = 64


class ExtraFile(models.Model):
    """Sidecar file stored next to a media file.

    Subtitles, metadata and artwork accompany a video file without being
    media themselves. Only the location relative to the owning media
    item's root directory is tracked; the item and file are referenced
    by ID so the owning-media system stays decoupled.

    A record without a primary key (``None`` or ``0``) was never
    persisted. ``added`` is stamped once on first save through the
    service, ``last_updated`` on every save.
    """

    media_item_id = models.PositiveBigIntegerField(
        db_index=True,
        help_text='Owning media item',
    )

    media_file_id = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        db_index=True,
        help_text='Owning media file, empty when attached to the item',
    )

    relative_path = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        help_text='Path relative to the media item root directory',
    )

    extension = models.CharField(
        max_length=_EXTENSION_MAX_LENGTH,
        blank=True,
        default='',
    )

    added = models.DateTimeField(null=True, blank=True)
    last_updated = models.DateTimeField(null=True, blank=True)

    class Meta:
        """Model metadata."""

        abstract = True
        ordering = ['relative_path']

        constraints = [
            # One record per path within a media item
            models.UniqueConstraint(
                fields=['media_item_id', 'relative_path'],
                name='%(app_label)s_%(class)s_path_unique',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'[{self.pk}] {self.relative_path}'

    @override
    def save(self, *args: object, **kwargs: object) -> None:
        """Fill in the extension before saving."""
        self.fill_extension()
        super().save(*args, **kwargs)  # type: ignore[arg-type]

    @property
    def is_persisted(self) -> bool:
        """Whether the record has been stored yet."""
        return self.pk is not None and self.pk > 0

    def fill_extension(self) -> None:
        """Derive ``extension`` from ``relative_path`` when it is empty.

        Example: 'Subs/movie.en.srt' -> '.srt'
        """
        if not self.extension:
            self.extension = PurePath(self.relative_path).suffix.lower()


@final
class SubtitleFile(ExtraFile):
    """Subtitle track stored next to a media file."""

    language = models.CharField(
        max_length=_LANGUAGE_MAX_LENGTH,
        blank=True,
        default='',
    )

    language_tags = models.CharField(
        max_length=_LANGUAGE_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Comma separated tags, e.g. "forced,sdh"',
    )

    class Meta(ExtraFile.Meta):
        """Model metadata."""

        verbose_name = 'Subtitle File'  # type: ignore[mutable-override]
        verbose_name_plural = 'Subtitle Files'  # type: ignore[mutable-override]

    def get_language_tags(self) -> list[str]:
        """Split language tags.

        Returns:
            Non-empty tags in stored order.
        """
        return [tag for tag in self.language_tags.split(',') if tag]


class MetadataType(models.IntegerChoices):
    """Kind of metadata file."""

    UNKNOWN = 0, 'Unknown'
    ITEM_METADATA = 1, 'Item metadata'
    ITEM_IMAGE = 2, 'Item image'


@final
class MetadataFile(ExtraFile):
    """Metadata or artwork written by a metadata consumer (NFO, poster)."""

    consumer = models.CharField(
        max_length=_CONSUMER_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Name of the metadata writer that produced the file',
    )

    type = models.PositiveSmallIntegerField(  # noqa: WPS125
        choices=MetadataType.choices,
        default=MetadataType.UNKNOWN,
    )

    hash = models.CharField(  # noqa: WPS125
        max_length=_HASH_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Content hash used to skip rewriting unchanged files',
    )

    class Meta(ExtraFile.Meta):
        """Model metadata."""

        verbose_name = 'Metadata File'  # type: ignore[mutable-override]
        verbose_name_plural = 'Metadata Files'  # type: ignore[mutable-override]


@final
class OtherExtraFile(ExtraFile):
    """Any other extra file kept with a media file."""

    class Meta(ExtraFile.Meta):
        """Model metadata."""

        verbose_name = 'Other Extra File'  # type: ignore[mutable-override]
        verbose_name_plural = 'Other Extra Files'  # type: ignore[mutable-override]
