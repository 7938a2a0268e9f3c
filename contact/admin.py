"""
Contact Management Django Admin Configuration
"""
from django.contrib import admin
from django.utils import timezone

from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    """Admin interface for contact submissions."""

    list_display = [
        'id', 'name', 'email', 'submitted_at', 'is_read', 'is_archived'
    ]

    list_filter = [
        'is_read', 'is_archived', 'submitted_at'
    ]

    search_fields = [
        'name', 'email', 'message', 'notes'
    ]

    readonly_fields = [
        'name', 'email', 'message', 'ip_address', 'user_agent',
        'submitted_at', 'read_at', 'created_at', 'updated_at'
    ]

    fieldsets = (
        ('Contact Information', {
            'fields': ('name', 'email', 'message')
        }),
        ('Triage', {
            'fields': ('is_read', 'read_at', 'is_archived', 'notes')
        }),
        ('Security & Tracking', {
            'fields': ('ip_address', 'user_agent'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('submitted_at', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        """Submissions only come in through the contact form."""
        return False

    def has_delete_permission(self, request, obj=None):
        """Submissions are never deleted."""
        return False

    def save_model(self, request, obj, form, change):
        """Keep read_at consistent when toggled from the admin."""
        if obj.is_read and obj.read_at is None:
            obj.read_at = timezone.now()
        super().save_model(request, obj, form, change)
