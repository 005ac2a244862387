"""S3 storage backend holding uploaded image bytes."""

import logging
from typing import Any, final, override

from storages.backends.s3 import S3Storage

logger = logging.getLogger(__name__)


@final
class BlobStorage(S3Storage):
    """Bucket of image blobs, one object per accepted upload.

    Every write and delete is logged with its key. ``discard`` is the
    non-raising delete used when a blob ends up without a FileInfo.
    """

    @override
    def save(  # noqa: WPS211
        self,
        name: str,
        content: Any,
        max_length: int | None = None,
    ) -> str:
        """Write an image blob.

        Args:
            name: Key built by ``build_storage_name``.
            content: Blob content, with ``content_type`` set.
            max_length: Optional maximum length for the key.

        Returns:
            Key the blob was stored under.
        """
        logger.info(
            'Writing blob %s (%s)',
            name,
            getattr(content, 'content_type', 'unknown type'),
        )
        try:
            stored_name = super().save(name, content, max_length)
        except Exception:
            logger.exception('Blob write failed: %s', name)
            raise
        logger.info('Blob written: %s', stored_name)
        return stored_name

    @override
    def delete(self, name: str) -> None:
        """Remove a blob.

        Args:
            name: Key of the blob.
        """
        try:
            super().delete(name)
        except Exception:
            logger.exception('Blob delete failed: %s', name)
            raise
        logger.info('Blob deleted: %s', name)

    def discard(self, name: str) -> bool:
        """Remove a blob without raising.

        Used on cleanup paths where another error is already being
        reported to the caller.

        Args:
            name: Key of the blob.

        Returns:
            True if the blob was deleted, False if it is now orphaned.
        """
        logger.warning('Discarding blob: %s', name)
        try:
            self.delete(name)
        except Exception:
            logger.warning('Blob left orphaned: %s', name)
            return False
        return True
