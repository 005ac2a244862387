"""Request and response serializers for account uploads."""

from rest_framework import serializers

from fserver.apps.accounts.models import Account
from fserver.apps.files.serializers import FileInfoSerializer


class AccountSerializer(serializers.ModelSerializer):
    """Account as returned in envelope entities, without the password."""

    file_info = FileInfoSerializer(read_only=True)

    class Meta:
        model = Account
        fields = ['id', 'email', 'file_info', 'created_at']


class AccountUploadSerializer(serializers.Serializer):
    """One upload with the fields of the account to create."""

    file = serializers.FileField(allow_empty_file=True)
    email = serializers.EmailField()
    password = serializers.CharField(max_length=128, trim_whitespace=False)
