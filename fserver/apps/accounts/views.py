"""HTTP views for uploads that create accounts."""

import logging
import re
from typing import Any, Final, final

from django.http import QueryDict
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from fserver.apps.accounts.logic.account_operations import (
    AccountFields,
    store_accounts,
    store_with_account,
)
from fserver.apps.accounts.serializers import (
    AccountSerializer,
    AccountUploadSerializer,
)
from fserver.apps.files.content import FileContent
from fserver.apps.files.envelope import render_envelope

# Batch fields are indexed: accounts[0].file, accounts[0].email, ...
_BATCH_FIELD: Final = re.compile(
    r'^accounts\[(?P<index>\d+)\]\.(?P<field>file|email|password)$',
)

logger = logging.getLogger(__name__)


def _to_item(validated: dict[str, Any]) -> tuple[FileContent, AccountFields]:
    return (
        FileContent.from_upload(validated['file']),
        AccountFields(
            email=validated['email'],
            password=validated['password'],
        ),
    )


def collect_batch_items(data: QueryDict) -> list[dict[str, Any]]:
    """Group indexed multipart fields into one mapping per account.

    Example: {'accounts[1].email': 'a@b.c', 'accounts[0].email': ...}
    -> [{'email': ...}, {'email': 'a@b.c'}]

    Args:
        data: Parsed multipart data and files.

    Returns:
        Field mappings ordered by index.
    """
    grouped: dict[int, dict[str, Any]] = {}
    for key in data:
        match = _BATCH_FIELD.match(key)
        if match is None:
            continue
        item = grouped.setdefault(int(match['index']), {})
        item[match['field']] = data[key]
    return [grouped[index] for index in sorted(grouped)]


@final
class SingleAccountView(APIView):
    """Store one upload and create an account for it."""

    def post(self, request: Request) -> Response:
        """Handle ``POST /accounts/single``.

        Args:
            request: Multipart request with file, email and password.

        Returns:
            Success envelope wrapping the created Account.
        """
        serializer = AccountUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        content, fields = _to_item(serializer.validated_data)
        envelope = store_with_account(content, fields)
        return Response(render_envelope(envelope, AccountSerializer))


@final
class BatchAccountView(APIView):
    """Store uploads and create one account per upload, all or nothing."""

    def post(self, request: Request) -> Response:
        """Handle ``POST /accounts/batch``.

        Args:
            request: Multipart request with indexed account fields.

        Returns:
            Success envelopes in input order.
        """
        serializer = AccountUploadSerializer(
            data=collect_batch_items(request.data),
            many=True,
        )
        serializer.is_valid(raise_exception=True)

        items = [_to_item(validated) for validated in serializer.validated_data]
        envelopes = store_accounts(items)
        logger.info("Account's saved with single file each: %d", len(envelopes))
        return Response([
            render_envelope(envelope, AccountSerializer)
            for envelope in envelopes
        ])
