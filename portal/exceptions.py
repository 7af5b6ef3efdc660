"""
Error taxonomy and the project-wide DRF exception handler.

Every API error leaves the server as
``{"ok": false, "error": {"code": ..., "message": ...}}``.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

GENERIC_SERVER_MESSAGE = 'Something went wrong'


class AlreadyExists(APIException):
    """A create collided with an existing unique value."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Record already exists'
    default_code = 'already_exists'


class InvalidCredentials(APIException):
    # Not derived from AuthenticationFailed: DRF downgrades that one to 403
    # when no authentication class provides a WWW-Authenticate header.
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid credentials'
    default_code = 'unauthorized'


class StoreFailure(APIException):
    """Any store error other than a uniqueness violation or a missing row."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'server_error'


def server_error_payload(exc: Exception) -> dict:
    message = str(exc) if settings.DEBUG else GENERIC_SERVER_MESSAGE
    return {'ok': False, 'error': {'code': 'server_error', 'message': message}}


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception('Unhandled error in %s', getattr(view, '__name__', view.__class__.__name__))
        return Response(server_error_payload(exc), status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    # normalize response
    if isinstance(exc, ValidationError):
        code = 'validation_error'
    else:
        code = getattr(exc, 'default_code', None) or 'api_error'
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    return Response({'ok': False, 'error': {'code': code, 'message': detail}},
                    status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp) -> dict:
    # keep Allow / Retry-After set by DRF
    return {k: v for k, v in resp.items() if k in ('Allow', 'Retry-After')}
