"""Issuing bearer tokens bound to a stored session."""

import jwt
from django.conf import settings

from accounts.models import Session

JWT_ALGORITHM = "HS256"


def create_session(user) -> str:
    """Sign a token for `user`, store it as a session and return it."""
    token = jwt.encode({"userId": user.id}, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)
    Session.objects.create(user=user, token=token)
    return token
