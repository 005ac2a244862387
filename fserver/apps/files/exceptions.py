"""Exceptions for the upload pipeline.

Every error knows the message shown to the caller, the HTTP status it
maps to and a structured ``detail()`` payload for the failure envelope.
Storage specifics never reach the message; they stay on ``__cause__``.
"""

from collections.abc import Iterable, Sequence
from http import HTTPStatus
from typing import Any


class UploadError(Exception):
    """Base class for all upload pipeline errors."""

    http_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        """Initialize UploadError.

        Args:
            message: Human-readable description for the caller.
        """
        self.message = message
        super().__init__(message)

    def detail(self) -> dict[str, Any]:
        """Structured error detail for the failure envelope.

        Returns:
            Mapping of detail fields, empty by default.
        """
        return {}


def _required(accepted: Iterable[str]) -> str:
    return ', '.join(accepted)


class InvalidFileFormatError(UploadError):
    """Raised when a single upload has a content type outside the whitelist."""

    http_status = HTTPStatus.BAD_REQUEST

    def __init__(self, content_type: str, accepted: Sequence[str]) -> None:
        """Initialize InvalidFileFormatError.

        Args:
            content_type: Offending declared content type.
            accepted: Content types the pipeline accepts.
        """
        self.content_type = content_type
        self.accepted = tuple(accepted)
        super().__init__(
            f'Wrong file type upload {content_type} '
            f'while required => {_required(self.accepted)}',
        )

    def detail(self) -> dict[str, Any]:
        """Offending type and the accepted set.

        Returns:
            Detail mapping.
        """
        return {
            'offending': self.content_type,
            'accepted': list(self.accepted),
        }


class EmptyBatchError(UploadError):
    """Raised when a batch call receives zero items."""

    http_status = HTTPStatus.BAD_REQUEST

    def __init__(self, size: int = 0) -> None:
        """Initialize EmptyBatchError.

        Args:
            size: Number of items received.
        """
        self.size = size
        super().__init__(f'Sorry! Batch contains invalid length {size}')

    def detail(self) -> dict[str, Any]:
        """Received batch size.

        Returns:
            Detail mapping.
        """
        return {'size': self.size}


class ValidationAggregateError(UploadError):
    """Raised when one or more batch items have a rejected content type.

    Carries every offender so the caller can fix the whole batch at once.
    """

    http_status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        offenders: Sequence[tuple[str, str]],
        accepted: Sequence[str],
    ) -> None:
        """Initialize ValidationAggregateError.

        Args:
            offenders: (filename, content_type) pairs that were rejected.
            accepted: Content types the pipeline accepts.
        """
        self.offenders = list(offenders)
        self.accepted = tuple(accepted)
        listed = ', '.join(
            f'{filename} => {content_type}'
            for filename, content_type in self.offenders
        )
        super().__init__(
            f'Wrong file type upload [{listed}] '
            f'while required => {_required(self.accepted)}',
        )

    def detail(self) -> dict[str, Any]:
        """Offenders list and the accepted set.

        Returns:
            Detail mapping.
        """
        return {
            'offenders': [
                {'filename': filename, 'content_type': content_type}
                for filename, content_type in self.offenders
            ],
            'accepted': list(self.accepted),
        }


class StorageFailureError(UploadError):
    """Raised when a blob, metadata or account write fails after validation."""

    http_status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, index: int | None = None) -> None:
        """Initialize StorageFailureError.

        Args:
            index: Position of the failing item when raised by a batch.
        """
        self.index = index
        if index is None:
            message = 'File storage failed'
        else:
            message = f'File storage failed at batch item {index}'
        super().__init__(message)

    def detail(self) -> dict[str, Any]:
        """Failing batch index, if any.

        Returns:
            Detail mapping.
        """
        if self.index is None:
            return {}
        return {'index': self.index}
