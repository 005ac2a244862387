"""Content type validation for uploads."""

import logging
from collections.abc import Iterable
from typing import Final

from fserver.apps.files.content import FileContent
from fserver.apps.files.exceptions import InvalidFileFormatError

# Fixed whitelist, not configurable
ACCEPTED_CONTENT_TYPES: Final = ('image/jpeg', 'image/png', 'image/jpg')

logger = logging.getLogger(__name__)


def is_accepted(content_type: str) -> bool:
    """Check declared content type against the whitelist.

    Args:
        content_type: MIME type declared by the client.

    Returns:
        True if the type is accepted.
    """
    return content_type in ACCEPTED_CONTENT_TYPES


def ensure_accepted(content: FileContent) -> None:
    """Reject a single upload with a non-image content type.

    Args:
        content: Upload to check.

    Raises:
        InvalidFileFormatError: If the content type is not accepted.
    """
    if not is_accepted(content.content_type):
        logger.info('File content reject %s', content.content_type)
        raise InvalidFileFormatError(
            content.content_type,
            ACCEPTED_CONTENT_TYPES,
        )
    logger.info('File content accept %s', content.content_type)


def find_rejected(contents: Iterable[FileContent]) -> list[tuple[str, str]]:
    """Collect every upload in a batch whose content type is rejected.

    Args:
        contents: Batch uploads in input order.

    Returns:
        (filename, content_type) pairs in input order.
    """
    rejected = []
    for content in contents:
        if not is_accepted(content.content_type):
            logger.debug('Wrong file found: %s', content.filename)
            rejected.append((content.filename, content.content_type))
    return rejected
