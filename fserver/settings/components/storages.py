"""Django storage configuration for S3-compatible backends.

Uploaded image bytes go to an S3-compatible bucket (MinIO locally,
any S3 provider in production) through django-storages.
"""

from typing import Any, Final

from fserver.settings.components import config

# Storage configuration dictionary
# Uses S3-compatible storage for uploaded blobs
STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'fserver.apps.files.infrastructure.storage.BlobStorage',
        'OPTIONS': {
            'bucket_name': config(
                'AWS_STORAGE_BUCKET_NAME',
                default='fserver',
            ),
            'access_key': config('AWS_ACCESS_KEY_ID', default=None),
            'secret_key': config('AWS_SECRET_ACCESS_KEY', default=None),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='us-east-1',
            ),
            'file_overwrite': False,  # Prevent accidental overwrites
            'default_acl': None,  # Inherit bucket ACL
        },
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
