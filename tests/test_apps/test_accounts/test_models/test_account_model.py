"""Tests for Account model."""

import pytest

from fserver.apps.accounts.models import Account
from fserver.apps.files.models import FileInfo


@pytest.mark.django_db
def test_account_str():
    """Test string representation is the email."""
    account = Account.objects.create(email='user@example.com', password='x')

    assert str(account) == 'user@example.com'


@pytest.mark.django_db
def test_file_info_delete_keeps_account(mock_s3):
    """Test deleting the upload unlinks it from the account."""
    file_info = FileInfo.objects.create(
        blob='uploads/abc/a.png',
        filename='a.png',
        content_type='image/png',
        size_bytes=5,
        checksum_sha256='abcd' * 16,
    )
    account = Account.objects.create(
        email='user@example.com',
        password='x',
        file_info=file_info,
    )

    FileInfo.objects.filter(id=file_info.id).delete()

    account.refresh_from_db()
    assert account.file_info is None
