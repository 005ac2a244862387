"""Uniform success/failure envelope returned by every upload endpoint."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, TypeVar, final

from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import exception_handler

from fserver.apps.files.exceptions import UploadError

_EntityT = TypeVar('_EntityT')

_INVALID_REQUEST_MESSAGE = 'Invalid request'

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True)
class ResponseEnvelope(Generic[_EntityT]):
    """Message, status and payload of a single operation result.

    ``status`` is rendered by its HTTP reason name (``OK``,
    ``BAD_REQUEST``...). Failure envelopes have no entity and may carry
    structured ``errors``.
    """

    message: str
    status: HTTPStatus
    entity: _EntityT | None = None
    errors: Mapping[str, Any] | list[Any] | None = None

    @property
    def is_success(self) -> bool:
        """Whether the envelope reports a successful operation."""
        return self.status == HTTPStatus.OK


def success(message: str, entity: _EntityT) -> ResponseEnvelope[_EntityT]:
    """Wrap a successful result.

    Args:
        message: Message shown to the caller.
        entity: Stored FileInfo or Account.

    Returns:
        Envelope with status OK.
    """
    return ResponseEnvelope(message=message, status=HTTPStatus.OK, entity=entity)


def failure(error: UploadError) -> ResponseEnvelope[None]:
    """Wrap a pipeline error.

    Args:
        error: Raised upload error.

    Returns:
        Envelope with the error's status and detail.
    """
    return ResponseEnvelope(
        message=error.message,
        status=error.http_status,
        errors=error.detail() or None,
    )


def render_envelope(
    envelope: ResponseEnvelope[Any],
    entity_serializer: type[serializers.BaseSerializer] | None = None,
) -> dict[str, Any]:
    """Convert an envelope to its JSON-ready form.

    Args:
        envelope: Envelope to render.
        entity_serializer: Serializer for the entity type, if any.

    Returns:
        Dictionary with message, status, entity and optional errors.
    """
    entity = None
    if envelope.entity is not None and entity_serializer is not None:
        entity = entity_serializer(envelope.entity).data

    rendered: dict[str, Any] = {
        'message': envelope.message,
        'status': envelope.status.name,
        'entity': entity,
    }
    if envelope.errors is not None:
        rendered['errors'] = envelope.errors
    return rendered


def envelope_exception_handler(
    exc: Exception,
    context: dict[str, Any],
) -> Response | None:
    """DRF exception handler returning failure envelopes.

    Pipeline errors are rendered from their own detail, DRF errors
    (parse errors, field validation) are reshaped from DRF's default
    response. Anything else is left for Django to turn into a 500.

    Args:
        exc: Exception raised by the view.
        context: DRF handler context.

    Returns:
        Response with a failure envelope, or None if unhandled.
    """
    if isinstance(exc, UploadError):
        logger.info(
            'Upload rejected with %s: %s',
            exc.http_status.name,
            exc.message,
        )
        return Response(
            render_envelope(failure(exc)),
            status=exc.http_status,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and set(data) == {'detail'}:
        message = str(data['detail'])
        errors = None
    else:
        message = _INVALID_REQUEST_MESSAGE
        errors = data

    envelope: ResponseEnvelope[None] = ResponseEnvelope(
        message=message,
        status=HTTPStatus(response.status_code),
        errors=errors,
    )
    response.data = render_envelope(envelope)
    return response
