"""
Contact Management Email Tasks

Celery task for the new-submission notification.

Delivery is at most once: the task is not retried and a failure is
logged and dropped. A submission is stored whether or not its
notification goes out.
"""
import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .models import ContactSubmission

logger = logging.getLogger(__name__)


def send_contact_notification(submission):
    """
    Email the site owner about a submission.

    Raises whatever the mail backend raises; callers decide whether a
    failure matters.
    """
    context = {'submission': submission}
    # Header-safe: line breaks in the name would make the subject invalid
    sender_name = " ".join(submission.name.split())
    subject = f"New Contact Form Submission from {sender_name}"
    text_content = render_to_string('contact/emails/submission_notification.txt', context)
    html_content = render_to_string('contact/emails/submission_notification.html', context)

    email = EmailMultiAlternatives(
        subject=subject,
        body=text_content,
        from_email=settings.CONTACT_EMAIL_FROM,
        to=[settings.CONTACT_EMAIL_TO],
        reply_to=[submission.email]
    )
    email.attach_alternative(html_content, "text/html")
    email.send(fail_silently=False)


@shared_task(ignore_result=True, acks_late=False, max_retries=0)
def send_submission_notification(submission_id):
    """
    Send the owner notification for a stored submission.

    Args:
        submission_id: Primary key of the ContactSubmission
    """
    try:
        submission = ContactSubmission.objects.get(id=submission_id)
    except ContactSubmission.DoesNotExist:
        logger.warning(f"Contact submission #{submission_id} not found, notification skipped")
        return

    try:
        send_contact_notification(submission)
    except Exception as exc:
        logger.error(f"Failed to send notification for submission #{submission_id}: {exc}")
        return

    logger.info(f"Notification sent for submission #{submission_id}")


def queue_submission_notification(submission):
    """
    Hand the notification to the task queue without waiting for it.

    An unreachable broker is logged, never raised, so the caller's
    request still succeeds.
    """
    try:
        send_submission_notification.delay(submission.id)
    except Exception as exc:
        logger.error(f"Could not queue notification for submission #{submission.id}: {exc}")
        return False
    return True
