"""Blob store: durable storage of raw upload bytes."""

import logging
from typing import TYPE_CHECKING

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from fserver.apps.files.content import FileContent
from fserver.apps.files.infrastructure.metadata import build_storage_name

if TYPE_CHECKING:
    from fserver.apps.files.infrastructure.storage import BlobStorage

logger = logging.getLogger(__name__)


def _get_storage() -> 'BlobStorage':
    """Get the configured default storage backend.

    Returns:
        BlobStorage instance with proper S3 configuration.
    """
    return default_storage  # type: ignore[return-value]


def save_blob(content: FileContent) -> str:
    """Write upload bytes to storage.

    Args:
        content: Validated upload.

    Returns:
        Storage handle (key) of the written blob.
    """
    storage_name = build_storage_name(
        settings.FILES_STORAGE_PREFIX,
        content.filename,
    )
    blob = ContentFile(content.data, name=storage_name)
    blob.content_type = content.content_type  # type: ignore[attr-defined]
    return _get_storage().save(storage_name, blob)


def delete_blob(handle: str) -> None:
    """Delete a blob.

    Args:
        handle: Storage handle returned by ``save_blob``.
    """
    _get_storage().delete(handle)


def discard_blob(handle: str) -> bool:
    """Best-effort delete of a blob left without metadata.

    Args:
        handle: Storage handle returned by ``save_blob``.

    Returns:
        True if the blob is gone, False if it remains orphaned.
    """
    return _get_storage().discard(handle)
