"""Database models for accounts app."""

from typing import Final, final, override

from django.db import models

from fserver.apps.files.models import FileInfo

_PASSWORD_MAX_LENGTH: Final = 128


@final
class Account(models.Model):
    """Account created together with an uploaded image.

    The password is kept as a Django password hash and never returned.
    An account is only ever created after its FileInfo is stored.
    """

    email = models.EmailField()

    password = models.CharField(
        max_length=_PASSWORD_MAX_LENGTH,
        help_text='Password hash',
    )

    file_info = models.OneToOneField(
        FileInfo,
        on_delete=models.SET_NULL,
        related_name='account',
        null=True,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Account'  # type: ignore[mutable-override]
        verbose_name_plural = 'Accounts'  # type: ignore[mutable-override]
        ordering = ['-created_at']

    @override
    def __str__(self) -> str:
        """String representation."""
        return self.email
