"""
Contact Management Serializers

Serializers for contact form submissions and admin management.
The API speaks camelCase; model fields are mapped with ``source``.
"""
from rest_framework import serializers

from .models import ContactSubmission


class ContactFormSubmitSerializer(serializers.Serializer):
    """
    Public contact form submission serializer.

    Name and message are trimmed before their lengths are checked.
    """

    name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            'min_length': 'Name must be at least 2 characters',
            'max_length': 'Name must be less than 100 characters',
        }
    )

    email = serializers.EmailField(
        max_length=320,
        error_messages={
            'invalid': 'Invalid email address',
            'max_length': 'Email must be less than 320 characters',
        }
    )

    message = serializers.CharField(
        min_length=10,
        max_length=5000,
        error_messages={
            'min_length': 'Message must be at least 10 characters',
            'max_length': 'Message must be less than 5000 characters',
        }
    )


class ContactSubmissionSerializer(serializers.ModelSerializer):
    """Full submission as shown in the admin dashboard."""

    ipAddress = serializers.CharField(source='ip_address', read_only=True, allow_null=True)
    userAgent = serializers.CharField(source='user_agent', read_only=True, allow_null=True)
    submittedAt = serializers.DateTimeField(source='submitted_at', read_only=True)
    isRead = serializers.BooleanField(source='is_read', read_only=True)
    isArchived = serializers.BooleanField(source='is_archived', read_only=True)
    readAt = serializers.DateTimeField(source='read_at', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = ContactSubmission
        fields = [
            'id', 'name', 'email', 'message', 'ipAddress', 'userAgent',
            'submittedAt', 'isRead', 'isArchived', 'readAt', 'notes',
            'createdAt', 'updatedAt'
        ]
        read_only_fields = fields


class ContactSubmissionUpdateSerializer(serializers.Serializer):
    """
    Partial admin update. Every field is optional and unknown keys are
    ignored.
    """

    isRead = serializers.BooleanField(source='is_read', required=False)
    isArchived = serializers.BooleanField(source='is_archived', required=False)
    notes = serializers.CharField(
        max_length=1000,
        required=False,
        allow_blank=True,
        trim_whitespace=False
    )
