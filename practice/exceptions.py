"""
Error taxonomy and the unified API exception handler.

Services raise the exceptions below; the handler installed as DRF's
``EXCEPTION_HANDLER`` turns every failure, expected or not, into the
``{"success": false, "message": ..., "error": ...}`` envelope so that no
request can take the process down.
"""
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response

# Re-exported so callers can import the whole taxonomy from one place
from rest_framework.exceptions import ValidationError  # noqa: F401

logger = logging.getLogger(__name__)


class NotFoundError(exceptions.NotFound):
    default_detail = 'Not found'
    default_code = 'not_found'


class ConflictError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflict'
    default_code = 'conflict'


class AuthError(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid credentials'
    default_code = 'authentication_failed'


class InternalError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'server_error'


_PRESERVED_HEADERS = ('WWW-Authenticate', 'Retry-After')


def _message_for(detail) -> str:
    if isinstance(detail, dict):
        return 'Validation error'
    if isinstance(detail, list):
        return str(detail[0]) if len(detail) == 1 else 'Validation error'
    return str(detail)


def api_exception_handler(exc, context):
    # rest_framework.views loads the authentication classes, which import this module
    from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception('Unhandled error in %s', type(view).__name__ if view else 'request')
        set_rollback()
        return Response(
            {'success': False, 'message': 'Internal server error', 'error': str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        detail = exc.detail
        error = detail if isinstance(detail, dict) else [str(d) for d in detail]
        body = {'success': False, 'message': _message_for(detail), 'error': error}
    else:
        if isinstance(exc, exceptions.APIException):
            detail, code = exc.detail, exc.get_codes()
        else:
            # Django's Http404 / PermissionDenied, already converted by DRF
            detail = resp.data.get('detail', resp.data) if isinstance(resp.data, dict) else resp.data
            code = getattr(detail, 'code', None)
        body = {'success': False, 'message': _message_for(detail), 'error': code if isinstance(code, str) else 'api_error'}

    normalized = Response(body, status=resp.status_code)
    for header in _PRESERVED_HEADERS:
        if header in resp:
            normalized[header] = resp[header]
    return normalized
