"""Management command to clean up old extra files from the recycle bin."""

import logging
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand

from server.apps.extras.infrastructure.disk import DiskProvider
from server.apps.extras.infrastructure.recycle_bin import RecycleBinProvider

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Permanently delete recycled extra files past their retention."""

    help = 'Clean up old extra files from the recycle bin'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be deleted without deleting',
        )
        parser.add_argument(
            '--days',
            type=int,
            default=None,
            help='Retention in days (default: EXTRAS_RECYCLE_BIN_CLEANUP_DAYS)',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the cleanup command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        dry_run = options['dry_run']
        retention_days = options['days']
        if retention_days is None:
            retention_days = getattr(
                settings,
                'EXTRAS_RECYCLE_BIN_CLEANUP_DAYS',
                7,
            )

        disk_provider = DiskProvider()
        recycle_bin = RecycleBinProvider(disk_provider)

        if recycle_bin.location is None:
            self.stdout.write('Recycle bin not configured, nothing to clean')
            return

        self.stdout.write(
            f'Looking for files in {recycle_bin.location} '
            f'older than {retention_days} days',
        )

        count = 0
        failed = 0

        for path in recycle_bin.list_expired(retention_days):
            if dry_run:
                self.stdout.write(f'Would delete: {path.name}')
                count += 1
                continue

            try:
                disk_provider.delete_file(path)
            except OSError as exc:
                self.stderr.write(f'Failed to delete {path.name}: {exc}')
                failed += 1
            else:
                logger.info('Purged file from recycle bin: %s', path)
                count += 1

        if dry_run:
            self.stdout.write(
                self.style.SUCCESS(f'Would purge {count} files from recycle bin'),
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Purged {count} files from recycle bin, {failed} failed',
                ),
            )
