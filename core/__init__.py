# Make sure the Celery app is loaded when Django starts so that
# shared_task picks up the project configuration.
from .celery import app as celery_app

__all__ = ('celery_app',)
