"""Tests for metadata store operations."""

import pytest

from fserver.apps.files.logic.metadata_operations import (
    delete_file_info,
    find_file_info,
    persist_file_info,
)
from fserver.apps.files.models import FileInfo


@pytest.mark.django_db
def test_persist_file_info_maps_every_field():
    """Test record fields come from the given arguments one to one."""
    file_info = persist_file_info(
        handle='uploads/abc/a.png',
        filename='a.png',
        content_type='image/png',
        size_bytes=1024,
        checksum='ab' * 32,
    )

    stored = FileInfo.objects.get(id=file_info.id)
    assert stored.blob.name == 'uploads/abc/a.png'
    assert stored.filename == 'a.png'
    assert stored.content_type == 'image/png'
    assert stored.size_bytes == 1024
    assert stored.checksum_sha256 == 'ab' * 32
    assert stored.created_at is not None


@pytest.mark.django_db
def test_find_file_info():
    """Test lookup by id returns the record or None."""
    file_info = persist_file_info(
        handle='uploads/abc/a.png',
        filename='a.png',
        content_type='image/png',
        size_bytes=10,
        checksum='ab' * 32,
    )

    assert find_file_info(file_info.id) == file_info
    assert find_file_info(file_info.id + 1) is None


@pytest.mark.django_db
def test_delete_file_info_removes_blob(mock_s3, bucket_name, blob_keys):
    """Test deleting a record also deletes its blob."""
    mock_s3.Object(bucket_name, 'uploads/abc/a.png').put(Body=b'image')
    file_info = persist_file_info(
        handle='uploads/abc/a.png',
        filename='a.png',
        content_type='image/png',
        size_bytes=5,
        checksum='ab' * 32,
    )

    delete_file_info(file_info)

    assert not FileInfo.objects.exists()
    assert blob_keys() == []
