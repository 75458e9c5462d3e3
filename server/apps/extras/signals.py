"""Signal wiring for extras app."""

import logging

from server.apps.extras.services import get_extra_file_services
from server.apps.media.events import media_file_deleted, media_item_deleted

logger = logging.getLogger(__name__)


def connect_services() -> None:
    """Subscribe every extra file service to media deletion events.

    Each service is its own receiver, so a failure in one kind does not
    keep the others from cleaning up. Stable ``dispatch_uid`` values make
    repeated calls harmless.
    """
    for kind, service in get_extra_file_services().items():
        media_item_deleted.connect(
            service.on_media_item_deleted,
            weak=False,
            dispatch_uid=f'extras.{kind}.media_item_deleted',
        )
        media_file_deleted.connect(
            service.on_media_file_deleted,
            weak=False,
            dispatch_uid=f'extras.{kind}.media_file_deleted',
        )
        logger.debug('Connected %s extra file service to media events', kind)
