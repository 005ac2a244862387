"""In-memory representation of an uploaded file."""

from dataclasses import dataclass
from typing import final

from django.core.files.uploadedfile import UploadedFile


@final
@dataclass(frozen=True, slots=True)
class FileContent:
    """Raw upload as decoded by the transport layer.

    Attributes:
        data: Complete file bytes.
        filename: Original filename sent by the client.
        content_type: Declared MIME type, empty when the client sent none.
    """

    data: bytes
    filename: str
    content_type: str

    @property
    def size(self) -> int:
        """Size of the content in bytes."""
        return len(self.data)

    @classmethod
    def from_upload(cls, upload: UploadedFile) -> 'FileContent':
        """Buffer a Django upload into memory.

        Args:
            upload: File decoded from a multipart request.

        Returns:
            FileContent with the full upload bytes.
        """
        return cls(
            data=b''.join(upload.chunks()),
            filename=upload.name or '',
            content_type=upload.content_type or '',
        )
