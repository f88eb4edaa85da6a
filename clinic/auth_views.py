"""
Authentication views: registration, login and access token refresh.

Tokens are issued by :mod:`clinic.services.tokens`; these views only
validate the payload, call the account service and shape the response.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from clinic.authentication import PublicEndpointAuthentication
from clinic.exceptions import AuthError
from clinic.serializers.auth import LoginSerializer, RefreshSerializer, RegisterSerializer
from clinic.services.accounts import authenticate_credentials, register_patient
from clinic.services.tokens import issue_token_pair, refresh_access


def _session_payload(user) -> dict[str, object]:
    tokens = issue_token_pair(user.id, user.role)
    return {
        **tokens,
        'user': {
            'id': user.id,
            'name': user.name,
            'email': user.email,
            'role': user.role,
        },
    }


# ---------------------------------------------------------------------
# Registration (always creates a patient)
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([PublicEndpointAuthentication])
@permission_classes([AllowAny])
def register_view(request):
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    user = register_patient(
        name=vd['name'],
        email=vd['email'],
        phone=vd['phone'],
        password=vd['password'],
    )
    payload = {'message': 'Registered successfully', **_session_payload(user)}
    return Response(payload, status=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------
# Email/password login
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([PublicEndpointAuthentication])
@permission_classes([AllowAny])
def login_view(request):
    """
    Accepts ``email`` and ``password``.  Any mismatch answers 401
    ``Invalid credentials`` without saying which part was wrong.
    """
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    user = authenticate_credentials(vd['email'], vd['password'], request=request)
    return Response(_session_payload(user), status=200)


# ---------------------------------------------------------------------
# JWT: refresh
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([PublicEndpointAuthentication])
@permission_classes([AllowAny])
def refresh_view(request):
    """Return a new access token from a refresh token (no rotation)."""
    s = RefreshSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    token = s.validated_data.get('token')
    if not token:
        raise AuthError('No token')
    return Response({'accessToken': refresh_access(token)})

