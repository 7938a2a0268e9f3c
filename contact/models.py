"""
Contact Management Models

Database schema for contact form submissions.
"""
from django.db import models
from django.utils import timezone


class ContactSubmission(models.Model):
    """
    Message sent through the portfolio contact form.

    Created by the public endpoint and only ever updated by an admin
    (read / archived flags and notes). Nothing in the API deletes rows.
    """

    # Contact Information
    name = models.CharField(
        max_length=100,
        help_text="Name of the person getting in touch"
    )

    email = models.EmailField(
        max_length=320,
        help_text="Address to reply to"
    )

    message = models.TextField(
        help_text="The message content (10-5000 characters)"
    )

    # Security and Tracking
    ip_address = models.GenericIPAddressField(
        null=True,
        blank=True,
        help_text="IP address of the submitter (for rate limiting and spam review)"
    )

    user_agent = models.TextField(
        null=True,
        blank=True,
        help_text="Browser user agent"
    )

    submitted_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        db_index=True,
        help_text="When the message was submitted"
    )

    # Admin triage
    is_read = models.BooleanField(
        default=False,
        db_index=True
    )

    is_archived = models.BooleanField(
        default=False,
        db_index=True
    )

    read_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="First time the submission was marked read"
    )

    notes = models.TextField(
        null=True,
        blank=True,
        help_text="Private notes from the admin"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'contact_submissions'
        ordering = ['-submitted_at', '-id']
        verbose_name = 'Contact Submission'
        verbose_name_plural = 'Contact Submissions'
        indexes = [
            models.Index(fields=['is_archived', 'submitted_at'], name='contact_sub_is_arch_5c1e0b_idx'),
            models.Index(fields=['email'], name='contact_sub_email_9a7f2d_idx'),
        ]

    def __str__(self):
        return f"#{self.pk} {self.name} <{self.email}>"

    def apply_update(self, is_read=None, is_archived=None, notes=None):
        """
        Apply a partial admin update and save the changed columns.

        ``read_at`` is stamped the first time the submission is marked
        read and is left alone afterwards, including when it is marked
        unread again. Returns the list of saved fields (empty for a no-op).
        """
        changed = []

        if is_read is not None:
            self.is_read = is_read
            changed.append('is_read')
            if is_read and self.read_at is None:
                self.read_at = timezone.now()
                changed.append('read_at')

        if is_archived is not None:
            self.is_archived = is_archived
            changed.append('is_archived')

        if notes is not None:
            self.notes = notes
            changed.append('notes')

        if changed:
            self.save(update_fields=changed + ['updated_at'])
        return changed
