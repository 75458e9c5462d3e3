"""Default extra file services, one per kind."""

from functools import cache, partial
from typing import Final

from server.apps.extras.infrastructure.disk import DiskProvider
from server.apps.extras.infrastructure.recycle_bin import RecycleBinProvider
from server.apps.extras.infrastructure.repository import ExtraFileRepository
from server.apps.extras.logic.extra_file_service import (
    ExtraFilePolicy,
    ExtraFileService,
)
from server.apps.extras.models import (
    ExtraFile,
    MetadataFile,
    OtherExtraFile,
    SubtitleFile,
)
from server.apps.media.logic.media_operations import get_media_item_path

SUBTITLE: Final = 'subtitle'
METADATA: Final = 'metadata'
OTHER: Final = 'other'

_MODELS: Final[dict[str, type[ExtraFile]]] = {
    SUBTITLE: SubtitleFile,
    METADATA: MetadataFile,
    OTHER: OtherExtraFile,
}


def build_extra_file_service(kind: str) -> ExtraFileService[ExtraFile]:
    """Create a service for kind with local disk collaborators.

    Args:
        kind: One of 'subtitle', 'metadata', 'other'.

    Returns:
        Service whose policy is read from settings on every use.

    Raises:
        KeyError: If kind is unknown.
    """
    disk_provider = DiskProvider()
    return ExtraFileService(
        repository=ExtraFileRepository(_MODELS[kind]),
        media_item_path=get_media_item_path,
        disk_provider=disk_provider,
        recycle_bin=RecycleBinProvider(disk_provider),
        policy=partial(ExtraFilePolicy.from_settings, kind),
    )


@cache
def get_extra_file_services() -> dict[str, ExtraFileService[ExtraFile]]:
    """Get the shared services, built on first use.

    Returns:
        Services keyed by kind.
    """
    return {kind: build_extra_file_service(kind) for kind in _MODELS}
