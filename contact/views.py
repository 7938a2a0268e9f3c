"""
Contact Management Views

API endpoints for contact form submission and admin management.
"""
import logging

from django.core.validators import validate_ipv46_address
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import generics, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend

from .filters import ContactSubmissionFilter
from .models import ContactSubmission
from .pagination import SubmissionPagination
from .permissions import IsContactAdmin
from .rate_limiting import rate_limit_contact_form, get_client_ip
from .serializers import (
    ContactFormSubmitSerializer,
    ContactSubmissionSerializer,
    ContactSubmissionUpdateSerializer,
)
from .tasks import queue_submission_notification

logger = logging.getLogger(__name__)

NOT_FOUND = {
    'success': False,
    'error': 'Not found',
    'message': 'Submission not found',
}


def _storable_ip(ip):
    """Client address if it is a valid IP literal, otherwise None."""
    try:
        validate_ipv46_address(ip)
    except DjangoValidationError:
        return None
    return ip


class ContactFormSubmitView(APIView):
    """
    Public endpoint for contact form submissions.

    POST /api/contact

    No authentication required. Rate limited per client IP.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @rate_limit_contact_form()
    def post(self, request):
        """Submit a contact form."""
        serializer = ContactFormSubmitSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(
                {
                    'success': False,
                    'error': 'Validation failed',
                    'fields': serializer.errors
                },
                status=status.HTTP_400_BAD_REQUEST
            )

        submission = ContactSubmission.objects.create(
            name=serializer.validated_data['name'],
            email=serializer.validated_data['email'],
            message=serializer.validated_data['message'],
            ip_address=_storable_ip(get_client_ip(request)),
            user_agent=request.META.get('HTTP_USER_AGENT') or None
        )
        logger.info(f"New contact submission #{submission.id} from {submission.email}")

        # Fire and forget: never blocks or fails the response
        queue_submission_notification(submission)

        return Response(
            {
                'success': True,
                'message': 'Thank you for your message! I will get back to you soon.',
                'submissionId': submission.id
            },
            status=status.HTTP_200_OK
        )


class ContactSubmissionListView(generics.ListAPIView):
    """
    List contact submissions (admin only).

    GET /api/submissions

    Query Parameters:
    - page: Page number (default: 1)
    - limit: Items per page (default: 20, max: 100)
    - isRead: true / false
    - isArchived: true / false
    - search: Case-insensitive match in name, email or message
    """

    permission_classes = [IsContactAdmin]
    serializer_class = ContactSubmissionSerializer
    queryset = ContactSubmission.objects.order_by('-submitted_at', '-id')
    filter_backends = [DjangoFilterBackend]
    filterset_class = ContactSubmissionFilter
    pagination_class = SubmissionPagination


class ContactSubmissionDetailView(APIView):
    """
    Get or update a single submission (admin only).

    GET   /api/submissions/:id
    PATCH /api/submissions/:id
    """

    permission_classes = [IsContactAdmin]

    def get(self, request, id):
        """Get submission details."""
        try:
            submission = ContactSubmission.objects.get(id=id)
        except ContactSubmission.DoesNotExist:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)

        return Response({
            'success': True,
            'submission': ContactSubmissionSerializer(submission).data
        })

    def patch(self, request, id):
        """Mark read/archived or edit notes."""
        serializer = ContactSubmissionUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    'success': False,
                    'error': 'Validation failed',
                    'fields': serializer.errors
                },
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            submission = ContactSubmission.objects.get(id=id)
        except ContactSubmission.DoesNotExist:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)

        changed = submission.apply_update(**serializer.validated_data)
        if changed:
            logger.info(f"Submission #{submission.id} updated by {request.user}: {', '.join(changed)}")

        return Response({
            'success': True,
            'submission': ContactSubmissionSerializer(submission).data
        })
