"""Database models for files app."""

from pathlib import Path
from typing import Final, final, override

from django.db import models

# Constants for field max lengths
_BLOB_MAX_LENGTH: Final = 512
_FILENAME_MAX_LENGTH: Final = 255
_CONTENT_TYPE_MAX_LENGTH: Final = 255
_CHECKSUM_MAX_LENGTH: Final = 64  # SHA256 hex length


@final
class FileInfo(models.Model):
    """Metadata of an uploaded image stored in S3-compatible storage.

    ``blob`` holds the storage handle returned by the blob store, the
    remaining fields describe the upload as the client sent it. Records
    are written once per successful upload and never updated.
    """

    blob = models.FileField(
        upload_to='',
        max_length=_BLOB_MAX_LENGTH,
        help_text='Storage key: {prefix}/{uuid}/{filename}',
    )

    filename = models.CharField(
        max_length=_FILENAME_MAX_LENGTH,
        help_text='Original filename as uploaded',
    )

    content_type = models.CharField(
        max_length=_CONTENT_TYPE_MAX_LENGTH,
        help_text='Declared MIME type of the upload',
    )

    size_bytes = models.BigIntegerField(
        help_text='File size in bytes',
    )

    checksum_sha256 = models.CharField(
        max_length=_CHECKSUM_MAX_LENGTH,
        help_text='SHA256 hash for integrity verification',
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'File info'  # type: ignore[mutable-override]
        verbose_name_plural = 'File infos'  # type: ignore[mutable-override]
        ordering = ['-created_at']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.filename} ({self.content_type}, {self.size_bytes} B)'

    def get_extension(self) -> str:
        """Extract file extension of the original filename.

        Example: 'photo.PNG' -> 'png'

        Returns:
            Extension without dot (lowercase).
        """
        extension = Path(self.filename).suffix
        return extension.lstrip('.').lower()
