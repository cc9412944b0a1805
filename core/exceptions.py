# core/exceptions.py
import logging

from django.db import DatabaseError, IntegrityError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

# Re-exported so callers import the whole taxonomy from one place
NotFoundError = NotFound

__all__ = [
    'ValidationError',
    'NotFoundError',
    'DuplicateError',
    'AuthError',
    'PendingApprovalError',
    'StoreError',
    'custom_exception_handler',
]


class DuplicateError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'A record with that value already exists.'
    default_code = 'duplicate'


class AuthError(APIException):
    """Login failure: unknown email or wrong password."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Authentication failed.'
    default_code = 'auth_failed'


class PendingApprovalError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Your account is pending approval.'
    default_code = 'pending_approval'


class StoreError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'The request could not be stored. Please try again.'
    default_code = 'store_error'


def _first_message(detail):
    if isinstance(detail, list):
        return _first_message(detail[0]) if detail else ''
    if isinstance(detail, dict):
        if 'detail' in detail:
            return _first_message(detail['detail'])
        for value in detail.values():
            return _first_message(value)
        return ''
    return str(detail)


def custom_exception_handler(exc, context):
    view = context.get('view')

    if isinstance(exc, Http404):
        exc = NotFoundError(*exc.args)
    elif isinstance(exc, IntegrityError):
        logger.warning("IntegrityError in %s: %s", view.__class__.__name__, exc)
        exc = DuplicateError()
    elif isinstance(exc, DatabaseError):
        logger.exception("Database error in %s", view.__class__.__name__)
        exc = StoreError()

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, APIException):
        codes = exc.get_codes()
    else:
        codes = None

    data = {
        'msg': _first_message(response.data),
        'code': _first_message(codes) if codes is not None else 'error',
    }
    if isinstance(exc, ValidationError) and isinstance(response.data, dict):
        errors = {key: value for key, value in response.data.items() if key != 'detail'}
        if errors:
            data['errors'] = errors

    response.data = data
    return response
