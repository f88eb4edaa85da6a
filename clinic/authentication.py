"""
Bearer authentication for API requests.

Access tokens are verified against the access signing secret and turned
into a stateless token user: the caller's id and role come straight
from the signed claims, without a database round trip.  Views that need
the stored account (booking, for example) look it up themselves.
"""
from __future__ import annotations

from rest_framework.authentication import BaseAuthentication
from rest_framework.permissions import SAFE_METHODS
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

from .exceptions import AuthError


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """Authenticate ``Authorization: Bearer <accessToken>`` headers.

    Invalid or expired tokens are reported as :class:`AuthError` so the
    response carries the project's error code instead of simplejwt's
    token-class breakdown.
    """

    def get_validated_token(self, raw_token):
        try:
            return super().get_validated_token(raw_token)
        except InvalidToken:
            raise AuthError('Invalid or expired token')


class PublicEndpointAuthentication(BaseAuthentication):
    """Authenticator for endpoints open to everyone.

    It never authenticates, so a stale bearer header sent to login or
    refresh is ignored, but it still advertises the Bearer scheme so an
    :class:`AuthError` raised by the view is answered with 401.
    """

    def authenticate(self, request):
        return None

    def authenticate_header(self, request):
        return 'Bearer realm="api"'


class ReadPublicBearerAuthentication(BearerTokenAuthentication):
    """Bearer authentication applied to writes only.

    Reads on public resources skip the token entirely, so an expired or
    malformed header does not lock a client out of browsing.
    """

    def authenticate(self, request):
        if request.method in SAFE_METHODS:
            return None
        return super().authenticate(request)
