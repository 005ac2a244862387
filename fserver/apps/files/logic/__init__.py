"""Business logic layer for files app.

This package contains the upload pipeline:
- Content type validation against the image whitelist
- Metadata store operations for FileInfo records
- Single and batch upload orchestration

All business logic should be implemented here, separate from
models (data layer), views (transport) and infrastructure
(external systems).
"""
