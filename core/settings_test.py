"""
Settings used by the pytest suite.

Layers test-only overrides on top of core.settings: SQLite, in-memory email
and cache, eager Celery and a process-local rate limiter.
"""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('JWT_SECRET', 'test-jwt-secret-not-for-production')

from .settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'portfolio-contact-tests',
    }
}

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

CELERY_BROKER_URL = 'memory://'
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False

CONTACT_EMAIL_TO = 'owner@portfolio.test'
CONTACT_EMAIL_FROM = 'noreply@portfolio.test'

CONTACT_FORM_RATE_LIMIT = {
    'STORE': 'contact.rate_limiting.InMemoryRateLimitStore',
    'MAX_REQUESTS': 3,
    'WINDOW_SECONDS': 3600,
}

SECURE_SSL_REDIRECT = False
