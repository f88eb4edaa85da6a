"""
Password hashing and session tokens.

Access tokens (15 minutes) are signed with ``JWT_SECRET`` through the
simplejwt backend configured in settings.  Refresh tokens (7 days) are
signed with ``JWT_REFRESH_SECRET`` through a backend of their own, so an
access token can never be replayed as a refresh token or the other way
round.  Both carry the user id and role claims.  Refresh tokens are not
rotated and there is no revocation list.
"""
from __future__ import annotations

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from clinic.exceptions import AuthError, ForbiddenError

ROLE_CLAIM = 'role'


def hash_password(plaintext: str) -> str:
    return make_password(plaintext)


def verify_password(plaintext: str, hashed: str) -> bool:
    if not hashed:
        return False
    return check_password(plaintext, hashed)


def _refresh_backend() -> TokenBackend:
    return TokenBackend(api_settings.ALGORITHM, signing_key=settings.JWT_REFRESH_SECRET)


class SessionAccessToken(AccessToken):
    """Access token carrying ``user_id`` and ``role``."""


class SessionRefreshToken(RefreshToken):
    """Refresh token signed with the refresh secret."""

    access_token_class = SessionAccessToken
    # Claims that are not copied into derived access tokens
    no_copy_claims = (
        api_settings.TOKEN_TYPE_CLAIM,
        'exp',
        api_settings.JTI_CLAIM,
        'jti',
        'iat',
    )

    def get_token_backend(self):
        return _refresh_backend()

    @property
    def token_backend(self):
        return _refresh_backend()


def _with_claims(token, user_id, role):
    token[api_settings.USER_ID_CLAIM] = user_id
    token[ROLE_CLAIM] = role
    return token


def issue_token_pair(user_id, role: str) -> dict[str, str]:
    refresh = _with_claims(SessionRefreshToken(), user_id, role)
    return {
        'accessToken': str(refresh.access_token),
        'refreshToken': str(refresh),
    }


def verify_access_token(token: str) -> dict:
    try:
        return dict(SessionAccessToken(token).payload)
    except TokenError:
        raise AuthError('Invalid or expired token')


def verify_refresh_token(token: str) -> SessionRefreshToken:
    try:
        return SessionRefreshToken(token)
    except TokenError:
        raise ForbiddenError('Invalid refresh token')


def refresh_access(refresh_token: str) -> str:
    """Mint a new access token from a valid refresh token.

    The claims are copied from the refresh token as they were when it was
    issued; the stored user row is not consulted.
    """
    refresh = verify_refresh_token(refresh_token)
    return str(refresh.access_token)
