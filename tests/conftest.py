"""Shared fixtures for all tests."""

from collections.abc import Callable

import boto3
import pytest
from django.conf import settings
from django.core.files.uploadedfile import SimpleUploadedFile
from moto import mock_aws
from rest_framework.test import APIClient

from fserver.apps.files.content import FileContent

ContentFactory = Callable[..., FileContent]
UploadFactory = Callable[..., SimpleUploadedFile]


@pytest.fixture
def bucket_name() -> str:
    """Name of the bucket the default storage writes to.

    Returns:
        Configured bucket name.
    """
    return settings.STORAGES['default']['OPTIONS']['bucket_name']


@pytest.fixture
def mock_s3(bucket_name):
    """Mock S3 service with the blob bucket.

    Yields:
        boto3 S3 resource with the bucket created.
    """
    with mock_aws():
        conn = boto3.resource('s3', region_name='us-east-1')
        conn.create_bucket(Bucket=bucket_name)

        yield conn


@pytest.fixture
def blob_keys(mock_s3, bucket_name) -> Callable[[], list[str]]:
    """List keys currently stored in the mocked bucket.

    Returns:
        Callable returning the stored keys.
    """
    def list_keys() -> list[str]:
        bucket = mock_s3.Bucket(bucket_name)
        return [blob.key for blob in bucket.objects.all()]
    return list_keys


@pytest.fixture
def make_content() -> ContentFactory:
    """Build in-memory uploads.

    Returns:
        Factory taking filename, content_type and size.
    """
    def factory(
        filename: str = 'a.png',
        content_type: str = 'image/png',
        size: int = 1024,
    ) -> FileContent:
        return FileContent(
            data=b'\x89' * size,
            filename=filename,
            content_type=content_type,
        )
    return factory


@pytest.fixture
def make_upload() -> UploadFactory:
    """Build multipart uploads for API tests.

    Returns:
        Factory taking filename, content_type and size.
    """
    def factory(
        filename: str = 'a.png',
        content_type: str = 'image/png',
        size: int = 1024,
    ) -> SimpleUploadedFile:
        return SimpleUploadedFile(
            filename,
            b'\x89' * size,
            content_type=content_type,
        )
    return factory


@pytest.fixture
def api_client() -> APIClient:
    """DRF test client.

    Returns:
        APIClient instance.
    """
    return APIClient()


@pytest.fixture(autouse=True)
def fast_password_hasher(settings) -> None:
    """Use a cheap hasher so account tests stay fast."""
    settings.PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]
