"""Infrastructure layer for files app.

This package contains integrations with external systems:
- S3-compatible storage backend for image blobs
- Blob store operations (save, delete, best-effort discard)
- Metadata helpers (checksum, storage key naming)

Keep infrastructure concerns separate from the upload pipeline.
"""
