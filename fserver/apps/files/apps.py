"""Django app configuration for files app."""

from typing import override

from django.apps import AppConfig


class FilesConfig(AppConfig):
    """Uploaded image metadata, blob storage and the upload pipeline."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'fserver.apps.files'
    verbose_name = 'Files'

    @override
    def ready(self) -> None:
        """Connect the blob cleanup signal handler."""
        from fserver.apps.files import signals  # noqa: F401
