"""
Management command to check the notification email setup.

Usage:
    python manage.py send_test_notification
"""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from contact.models import ContactSubmission
from contact.tasks import send_contact_notification


class Command(BaseCommand):
    help = 'Sends a sample contact notification synchronously'

    def add_arguments(self, parser):
        parser.add_argument(
            '--name',
            default='Test User',
            help='Sender name shown in the sample submission'
        )
        parser.add_argument(
            '--email',
            default='test@example.com',
            help='Reply-to address of the sample submission'
        )

    def handle(self, *args, **options):
        # Never saved: the sample only feeds the email templates
        sample = ContactSubmission(
            id=999,
            name=options['name'],
            email=options['email'],
            message='This is a test email from the send_test_notification command.',
            submitted_at=timezone.now(),
        )

        self.stdout.write(f'Backend:  {settings.EMAIL_BACKEND}')
        self.stdout.write(f'From:     {settings.CONTACT_EMAIL_FROM}')
        self.stdout.write(f'To:       {settings.CONTACT_EMAIL_TO}')

        try:
            send_contact_notification(sample)
        except Exception as exc:
            raise CommandError(f'Email test failed: {exc}') from exc

        self.stdout.write(self.style.SUCCESS('Email sent successfully! Check your inbox.'))
