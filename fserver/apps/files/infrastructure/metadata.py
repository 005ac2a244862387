"""Metadata helpers for uploaded blobs."""

import hashlib
import re
import uuid
from pathlib import Path
from typing import Final

_FALLBACK_NAME: Final = 'upload'
_UNSAFE_CHARS: Final = re.compile(r'[^-\w.]')


def calculate_checksum(data: bytes) -> str:
    """Calculate SHA256 checksum of blob content.

    Args:
        data: Blob bytes.

    Returns:
        Hex-encoded SHA256 hash string.
    """
    return hashlib.sha256(data).hexdigest()


def sanitize_filename(filename: str) -> str:
    """Reduce a client filename to a safe storage key segment.

    Directory components are dropped, spaces become underscores and
    anything outside ``[-\\w.]`` is removed.

    Args:
        filename: Filename as sent by the client.

    Returns:
        Safe filename, ``upload`` if nothing usable remains.
    """
    name = Path(filename.replace('\\', '/')).name.strip().replace(' ', '_')
    name = _UNSAFE_CHARS.sub('', name)
    if name in {'', '.', '..'}:
        return _FALLBACK_NAME
    return name


def build_storage_name(prefix: str, filename: str) -> str:
    """Build a unique storage key for an upload.

    Example: ('uploads', 'my photo.png') -> 'uploads/<hex>/my_photo.png'

    Args:
        prefix: Key prefix from settings.
        filename: Original filename.

    Returns:
        Storage key that never collides with earlier uploads.
    """
    return '{prefix}/{unique}/{name}'.format(
        prefix=prefix.strip('/'),
        unique=uuid.uuid4().hex,
        name=sanitize_filename(filename),
    )
