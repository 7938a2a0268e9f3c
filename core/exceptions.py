"""
API Exception Handling

Gives every error response the same envelope as the handlers' own
responses: ``{"success": false, "error": ..., ...}``.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    DRF exception handler.

    Known API exceptions keep their status code and headers
    (WWW-Authenticate, Retry-After) but are reshaped. Anything DRF does not
    recognise is logged and turned into a 500 without leaking a traceback.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}")

        data = {
            'success': False,
            'error': 'Internal server error',
            'message': 'Something went wrong. Please try again later.',
        }
        if settings.DEBUG:
            data['debug'] = {'error': str(exc)}
        return Response(data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        response.data = {
            'success': False,
            'error': 'Validation failed',
            'fields': response.data,
        }
        return response

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    response.data = {
        'success': False,
        'error': str(detail) if detail is not None else response.status_text,
    }
    return response
