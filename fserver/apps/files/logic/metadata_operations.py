"""Metadata store: persistence of FileInfo records."""

import logging

from django.db import transaction

from fserver.apps.files.models import FileInfo

logger = logging.getLogger(__name__)


def persist_file_info(  # noqa: WPS211
    handle: str,
    filename: str,
    content_type: str,
    size_bytes: int,
    checksum: str,
) -> FileInfo:
    """Create the FileInfo record for a stored blob.

    Args:
        handle: Storage handle of the blob.
        filename: Original filename.
        content_type: Declared MIME type.
        size_bytes: Blob size in bytes.
        checksum: SHA256 hex digest of the blob.

    Returns:
        Created FileInfo instance.
    """
    with transaction.atomic():
        file_info = FileInfo.objects.create(
            blob=handle,
            filename=filename,
            content_type=content_type,
            size_bytes=size_bytes,
            checksum_sha256=checksum,
        )
    logger.info(
        'File record created in database: %s (ID: %d)',
        handle,
        file_info.id,
    )
    return file_info


def find_file_info(file_info_id: int) -> FileInfo | None:
    """Fetch a FileInfo record by id.

    Args:
        file_info_id: Record id.

    Returns:
        FileInfo instance, or None if it does not exist.
    """
    return FileInfo.objects.filter(id=file_info_id).first()


def delete_file_info(file_info: FileInfo) -> None:
    """Delete a FileInfo record.

    The blob is removed by the post_delete signal handler in signals.py.

    Args:
        file_info: Record to delete.
    """
    file_info_id = file_info.id
    with transaction.atomic():
        file_info.delete()
    logger.info('File record deleted from database: ID=%d', file_info_id)
