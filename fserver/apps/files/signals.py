"""Signal handlers for files app."""

import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver

from fserver.apps.files.infrastructure.blob_store import discard_blob
from fserver.apps.files.models import FileInfo

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=FileInfo)
def delete_blob_from_storage(
    sender: type[FileInfo],
    instance: FileInfo,
    **kwargs: object,
) -> None:
    """Remove the blob of a deleted FileInfo.

    Runs on every delete path, so compensating deletes only need to
    remove the record. The record delete is never blocked by storage
    errors; a blob that cannot be removed is logged as orphaned.

    Args:
        sender: The FileInfo model class.
        instance: The deleted FileInfo.
        **kwargs: Additional signal arguments.
    """
    handle = instance.blob.name
    if not handle:
        return

    if discard_blob(handle):
        logger.info('Blob removed with FileInfo %s: %s', instance.pk, handle)
