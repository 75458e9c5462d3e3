"""Django app configuration for extras app."""

from typing import override

from django.apps import AppConfig


class ExtrasConfig(AppConfig):
    """Configuration for extras app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.extras'
    verbose_name = 'Extra Files'

    @override
    def ready(self) -> None:
        """Subscribe extra file services to media events."""
        from server.apps.extras import signals  # noqa: WPS433

        signals.connect_services()
