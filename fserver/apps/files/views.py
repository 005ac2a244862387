"""HTTP views for file uploads."""

import logging
from typing import final

from django.http import HttpRequest, HttpResponse
from django.views.decorators.http import require_GET
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from fserver.apps.files.content import FileContent
from fserver.apps.files.envelope import render_envelope
from fserver.apps.files.logic.upload_operations import store_many, store_single
from fserver.apps.files.serializers import (
    BatchUploadSerializer,
    FileInfoSerializer,
    SingleUploadSerializer,
)

logger = logging.getLogger(__name__)


@require_GET
def ping(request: HttpRequest) -> HttpResponse:
    """Liveness check, always answers ``pong``."""
    logger.info('server-active')
    return HttpResponse('pong', content_type='text/plain')


@final
class SingleFileUploadView(APIView):
    """Store one image upload."""

    def post(self, request: Request) -> Response:
        """Handle ``POST /files/single``.

        Args:
            request: Multipart request with a ``file`` field.

        Returns:
            Success envelope wrapping the stored FileInfo.
        """
        logger.info('upload-single file')
        serializer = SingleUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        content = FileContent.from_upload(serializer.validated_data['file'])
        envelope = store_single(content)
        return Response(render_envelope(envelope, FileInfoSerializer))


@final
class BatchFileUploadView(APIView):
    """Store a batch of image uploads, all or nothing."""

    def post(self, request: Request) -> Response:
        """Handle ``POST /files/batch``.

        Args:
            request: Multipart request with repeated ``files`` fields.

        Returns:
            Success envelopes in upload order.
        """
        logger.info('upload-multiple files')
        serializer = BatchUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        contents = [
            FileContent.from_upload(upload)
            for upload in serializer.validated_data['files']
        ]
        envelopes = store_many(contents)
        return Response([
            render_envelope(envelope, FileInfoSerializer)
            for envelope in envelopes
        ])
