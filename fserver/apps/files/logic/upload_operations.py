"""Upload pipeline: single and batch image ingestion."""

import logging
import time
from collections.abc import Iterable, Sequence
from typing import Final

from fserver.apps.files.content import FileContent
from fserver.apps.files.envelope import ResponseEnvelope, success
from fserver.apps.files.exceptions import (
    EmptyBatchError,
    StorageFailureError,
    ValidationAggregateError,
)
from fserver.apps.files.infrastructure.blob_store import discard_blob, save_blob
from fserver.apps.files.infrastructure.metadata import calculate_checksum
from fserver.apps.files.logic.metadata_operations import (
    delete_file_info,
    persist_file_info,
)
from fserver.apps.files.logic.validation import (
    ACCEPTED_CONTENT_TYPES,
    ensure_accepted,
    find_rejected,
)
from fserver.apps.files.models import FileInfo

FILE_STORED_MESSAGE: Final = 'File Store :- '

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def store_single(content: FileContent) -> ResponseEnvelope[FileInfo]:
    """Validate and store one upload.

    Validation happens before any I/O. The blob is written first, then
    the metadata record; if the record cannot be written the blob is
    discarded so no blob outlives a failed upload.

    Args:
        content: Upload decoded by the transport layer.

    Returns:
        Success envelope wrapping the created FileInfo.

    Raises:
        InvalidFileFormatError: If the content type is not accepted.
        StorageFailureError: If the blob or record write fails.
    """
    started = time.perf_counter()
    ensure_accepted(content)

    # Step 1: Upload bytes to storage
    try:
        handle = save_blob(content)
    except Exception as error:
        logger.exception('Failed to store blob for: %s', content.filename)
        raise StorageFailureError() from error
    logger.info('File upload time: %.1f ms', _elapsed_ms(started))

    # Step 2: Create metadata record
    try:
        file_info = persist_file_info(
            handle=handle,
            filename=content.filename,
            content_type=content.content_type,
            size_bytes=content.size,
            checksum=calculate_checksum(content.data),
        )
    except Exception as error:
        logger.exception(
            'Metadata write failed, discarding stored blob: %s',
            handle,
        )
        discard_blob(handle)
        raise StorageFailureError() from error

    logger.info('File data-store time: %.1f ms', _elapsed_ms(started))
    return success(FILE_STORED_MESSAGE, file_info)


def store_many(
    contents: Sequence[FileContent],
) -> list[ResponseEnvelope[FileInfo]]:
    """Validate a whole batch, then store every upload in order.

    Nothing is stored unless every item passes validation. A storage
    failure part way through removes the files this call already stored,
    so a batch is stored completely or not at all.

    Args:
        contents: Uploads in input order.

    Returns:
        Success envelopes index-aligned with ``contents``.

    Raises:
        EmptyBatchError: If ``contents`` is empty.
        ValidationAggregateError: If any item has a rejected content type.
        StorageFailureError: If any item fails to store.
    """
    started = time.perf_counter()
    if not contents:
        logger.error('Batch contains invalid length %d', len(contents))
        raise EmptyBatchError(size=0)

    offenders = find_rejected(contents)
    if offenders:
        logger.error('Wrong files in batch: %s', offenders)
        raise ValidationAggregateError(offenders, ACCEPTED_CONTENT_TYPES)

    envelopes: list[ResponseEnvelope[FileInfo]] = []
    for index, content in enumerate(contents):
        try:
            envelopes.append(store_single(content))
        except StorageFailureError as error:
            logger.warning(
                'Batch failed at item %d, discarding %d stored files',
                index,
                len(envelopes),
            )
            discard_file_infos(
                envelope.entity
                for envelope in envelopes
                if envelope.entity is not None
            )
            raise StorageFailureError(index=index) from error

    logger.info(
        'Stored batch of %d files in %.1f ms',
        len(envelopes),
        _elapsed_ms(started),
    )
    return envelopes


def discard_file_infos(file_infos: Iterable[FileInfo]) -> None:
    """Remove files stored earlier in a failed operation.

    Best-effort: every record is attempted, failures are logged and the
    remaining records are still processed.

    Args:
        file_infos: Records to delete along with their blobs.
    """
    for file_info in file_infos:
        try:
            delete_file_info(file_info)
        except Exception:
            logger.exception(
                'Failed to discard stored file (orphaned): ID=%d',
                file_info.id,
            )
