"""
Service-level endpoints.
"""
import os

from django.conf import settings
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Report that the API is up and which integrations are configured.

    Only presence flags are returned, never the values themselves.
    """
    return Response({
        'success': True,
        'message': 'API is working!',
        'env': {
            'hasDatabase': bool(os.getenv('DB_NAME') or os.getenv('DATABASE_URL')),
            'hasEmail': bool(settings.EMAIL_HOST_PASSWORD) or 'smtp' not in settings.EMAIL_BACKEND,
            'hasJwtSecret': bool(settings.SIMPLE_JWT.get('SIGNING_KEY')),
            'hasAdminEmail': bool(settings.CONTACT_EMAIL_TO),
        },
    })
