"""Business logic for creating accounts around stored uploads."""

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, final

from django.contrib.auth.hashers import make_password
from django.db import transaction

from fserver.apps.accounts.models import Account
from fserver.apps.files.content import FileContent
from fserver.apps.files.envelope import ResponseEnvelope, success
from fserver.apps.files.exceptions import (
    EmptyBatchError,
    StorageFailureError,
    ValidationAggregateError,
)
from fserver.apps.files.logic.upload_operations import (
    discard_file_infos,
    store_single,
)
from fserver.apps.files.logic.validation import (
    ACCEPTED_CONTENT_TYPES,
    find_rejected,
)
from fserver.apps.files.models import FileInfo

ACCOUNT_SAVED_MESSAGE: Final = 'File save with account'

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class AccountFields:
    """Account data sent alongside an upload."""

    email: str
    password: str


def save_account(
    email: str,
    password: str,
    file_info: FileInfo | None,
) -> Account:
    """Persist an account.

    Args:
        email: Account email.
        password: Raw password, stored hashed.
        file_info: Stored upload owned by the account.

    Returns:
        Created Account instance.
    """
    with transaction.atomic():
        account = Account.objects.create(
            email=email,
            password=make_password(password),
            file_info=file_info,
        )
    logger.info('Account added: %s (ID: %d)', email, account.id)
    return account


def delete_account(account: Account) -> None:
    """Delete an account, keeping its FileInfo.

    Args:
        account: Account to delete.
    """
    account_id = account.id
    with transaction.atomic():
        account.delete()
    logger.info('Account deleted from database: ID=%d', account_id)


def store_with_account(
    content: FileContent,
    fields: AccountFields,
) -> ResponseEnvelope[Account]:
    """Store one upload and create the account referencing it.

    The account is only created once the upload is stored. If the
    account cannot be saved the stored upload is removed again.

    Args:
        content: Upload decoded by the transport layer.
        fields: Email and password of the new account.

    Returns:
        Success envelope wrapping the created Account.

    Raises:
        InvalidFileFormatError: If the content type is not accepted.
        StorageFailureError: If storing the upload or the account fails.
    """
    started = time.perf_counter()
    logger.info('File save with account')
    stored = store_single(content)
    file_info = stored.entity

    try:
        account = save_account(fields.email, fields.password, file_info)
    except Exception as error:
        logger.exception('Failed to save account: %s', fields.email)
        if file_info is not None:
            discard_file_infos([file_info])
        raise StorageFailureError() from error

    logger.info(
        'Total account response time: %.1f ms',
        (time.perf_counter() - started) * 1000,
    )
    return success(ACCOUNT_SAVED_MESSAGE, account)


def store_accounts(
    items: Sequence[tuple[FileContent, AccountFields]],
) -> list[ResponseEnvelope[Account]]:
    """Validate every upload, then create accounts in order.

    No upload or account is stored unless every upload passes
    validation. A storage failure part way through removes the accounts
    and uploads this call already created.

    Args:
        items: (upload, account fields) pairs in input order.

    Returns:
        Success envelopes index-aligned with ``items``.

    Raises:
        EmptyBatchError: If ``items`` is empty.
        ValidationAggregateError: If any upload has a rejected content type.
        StorageFailureError: If any item fails to store.
    """
    if not items:
        logger.error('Account batch contains invalid length %d', len(items))
        raise EmptyBatchError(size=0)

    offenders = find_rejected(content for content, _ in items)
    if offenders:
        logger.error('Accounts with wrong file type: %s', offenders)
        raise ValidationAggregateError(offenders, ACCEPTED_CONTENT_TYPES)

    logger.info("Saving %d account's", len(items))
    envelopes: list[ResponseEnvelope[Account]] = []
    for index, (content, fields) in enumerate(items):
        try:
            envelopes.append(store_with_account(content, fields))
        except StorageFailureError as error:
            logger.warning(
                'Account batch failed at item %d, discarding %d accounts',
                index,
                len(envelopes),
            )
            discard_accounts(
                envelope.entity
                for envelope in envelopes
                if envelope.entity is not None
            )
            raise StorageFailureError(index=index) from error

    return envelopes


def discard_accounts(accounts: Iterable[Account]) -> None:
    """Remove accounts, and their uploads, created in a failed batch.

    Best-effort: failures are logged and the remaining accounts are
    still processed.

    Args:
        accounts: Accounts to delete.
    """
    for account in accounts:
        file_info = account.file_info
        try:
            delete_account(account)
        except Exception:
            logger.exception(
                'Failed to discard account (orphaned): ID=%d',
                account.id,
            )
            continue
        if file_info is not None:
            discard_file_infos([file_info])
