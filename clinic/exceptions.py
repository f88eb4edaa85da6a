"""
Error taxonomy and the unified DRF exception handler.

Every failure leaves the API as ``{"ok": false, "error": {"code", "message"}}``.
Anything that is not an :class:`APIException` is logged with its
traceback and answered with a generic 500.
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class ValidationError(exceptions.ValidationError):
    default_code = 'validation_error'


class AuthError(exceptions.AuthenticationFailed):
    default_detail = 'Invalid credentials'
    default_code = 'unauthorized'


class ForbiddenError(exceptions.PermissionDenied):
    default_code = 'forbidden'


class NotFoundError(exceptions.NotFound):
    default_code = 'not_found'


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists'
    default_code = 'conflict'


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'server_error'


def api_exception_handler(exc, context):
    # rest_framework.views loads the authentication classes, which import this module
    from rest_framework.views import exception_handler as drf_exception_handler

    resp = drf_exception_handler(exc, context)
    if resp is None:
        request = context.get('request')
        logger.exception('Unhandled error on %s %s', getattr(request, 'method', '-'), getattr(request, 'path', '-'), exc_info=exc)
        return Response(
            {'ok': False, 'error': {'code': InternalError.default_code, 'message': str(InternalError.default_detail)}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if resp.status_code >= 500:
        logger.error('Server error %s: %s', resp.status_code, exc)
    # normalize response
    if isinstance(resp.data, dict) and set(resp.data) <= {'detail', 'code', 'messages'} and 'detail' in resp.data:
        detail = resp.data['detail']
    else:
        detail = resp.data
    if isinstance(exc, exceptions.ValidationError):
        code = ValidationError.default_code
    else:
        code = getattr(exc, 'default_code', 'api_error')
    return Response({'ok': False, 'error': {'code': code, 'message': detail}},
                    status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp):
    headers = {}
    for name in ('WWW-Authenticate', 'Retry-After'):
        if resp.has_header(name):
            headers[name] = resp[name]
    return headers
