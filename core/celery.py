"""
Celery configuration for the portfolio contact API.

Background work is limited to the contact notification email. Tasks are
acknowledged on receipt and never retried, so a notification is delivered
at most once.
"""
import os
from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

# Create Celery app
app = Celery('core')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all installed apps
app.autodiscover_tasks()

# Celery configuration
app.conf.update(
    # Notifications are fire-and-forget
    task_ignore_result=True,

    # Task time limits
    task_time_limit=60,
    task_soft_time_limit=45,

    # At-most-once: ack before running, never redeliver
    task_acks_late=False,
    task_reject_on_worker_lost=False,

    # Prefetch multiplier (1 = fair distribution)
    worker_prefetch_multiplier=1,

    # Serialization
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],

    timezone='UTC',
    enable_utc=True,
)
