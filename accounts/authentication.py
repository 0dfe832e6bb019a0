"""Bearer token authentication backed by stored sessions."""

import logging

import jwt
from django.conf import settings
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.request import Request

from accounts.models import Session
from accounts.sessions import JWT_ALGORITHM

logger = logging.getLogger("accounts.authentication")

KEYWORD = "Bearer"


class BearerSessionAuthentication(BaseAuthentication):
    """Authenticate `Authorization: Bearer <token>` against issued sessions.

    The token must carry a valid signature and a `userId` claim, and a
    session holding exactly that token must exist.
    """

    def authenticate(self, request: Request):
        header = get_authorization_header(request).split()
        if not header:
            return None
        try:
            keyword, token = (part.decode() for part in header)
        except (ValueError, UnicodeError):
            raise exceptions.AuthenticationFailed("Invalid authorization header")
        if keyword.lower() != KEYWORD.lower():
            raise exceptions.AuthenticationFailed("Invalid authorization header")

        try:
            payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[JWT_ALGORITHM])
        except jwt.InvalidTokenError:
            logger.debug("Rejected bearer token with invalid signature or format")
            raise exceptions.AuthenticationFailed("Invalid token")

        user_id = payload.get("userId")
        session = (
            Session.objects.select_related("user")
            .filter(token=token, user_id=user_id)
            .first()
        )
        if session is None:
            logger.warning("No session found for user %s", user_id)
            raise exceptions.AuthenticationFailed("Session not found")

        return session.user, token

    def authenticate_header(self, request: Request) -> str:
        return KEYWORD
