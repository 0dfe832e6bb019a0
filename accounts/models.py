"""Django ORM models for issued login sessions."""

from django.conf import settings
from django.db import models


class Session(models.Model):
    """A bearer token issued to a user at sign-in."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sessions"
    )
    token = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Session {self.pk} for user {self.user_id}"
