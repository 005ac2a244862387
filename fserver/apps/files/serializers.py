"""Request and response serializers for file uploads."""

from rest_framework import serializers

from fserver.apps.files.models import FileInfo


class FileInfoSerializer(serializers.ModelSerializer):
    """FileInfo as returned in envelope entities."""

    blob = serializers.CharField(source='blob.name', read_only=True)
    size = serializers.IntegerField(source='size_bytes', read_only=True)

    class Meta:
        model = FileInfo
        fields = [
            'id',
            'blob',
            'filename',
            'content_type',
            'size',
            'checksum_sha256',
            'created_at',
        ]


class SingleUploadSerializer(serializers.Serializer):
    """Multipart body of ``POST /files/single``."""

    file = serializers.FileField(allow_empty_file=True)


class BatchUploadSerializer(serializers.Serializer):
    """Multipart body of ``POST /files/batch``.

    A missing ``files`` field is an empty batch, rejected by the pipeline.
    """

    files = serializers.ListField(
        child=serializers.FileField(allow_empty_file=True),
        default=list,
    )
