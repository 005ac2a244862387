"""Upload pipeline settings."""

from fserver.settings.components import config

# Key prefix for blobs written to object storage
FILES_STORAGE_PREFIX = config('FILES_STORAGE_PREFIX', default='uploads')
