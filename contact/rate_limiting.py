"""
Rate Limiting Utilities for Contact Form

Fixed-window limiter: each key gets ``max_requests`` within a window that
starts at its first request and resets completely when the window ends.
Counters live in a pluggable store:

- InMemoryRateLimitStore: per-process dict. Only correct for a single
  long-lived process.
- CacheRateLimitStore: Django cache (Redis in production), shared by all
  instances, entries expire with the window.
"""
import logging
import math
import threading
import time
from functools import wraps

from django.conf import settings
from django.core.cache import cache
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string
from rest_framework import status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def get_client_ip(request):
    """Get client IP address from request."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
        if ip:
            return ip
    return request.META.get('REMOTE_ADDR') or 'unknown'


class RateLimitStore:
    """Key/value storage for window records ``{'count', 'reset_at'}``."""

    def get(self, key):
        raise NotImplementedError

    def set(self, key, record, ttl):
        raise NotImplementedError

    def clear(self):
        raise NotImplementedError


class InMemoryRateLimitStore(RateLimitStore):
    def __init__(self):
        self._records = {}

    def get(self, key):
        record = self._records.get(key)
        return dict(record) if record is not None else None

    def set(self, key, record, ttl):
        self._records[key] = dict(record)

    def clear(self):
        self._records.clear()


class CacheRateLimitStore(RateLimitStore):
    def __init__(self, key_prefix='contact-rate-limit'):
        self.key_prefix = key_prefix

    def _cache_key(self, key):
        return f"{self.key_prefix}:{key}"

    def get(self, key):
        return cache.get(self._cache_key(key))

    def set(self, key, record, ttl):
        cache.set(self._cache_key(key), record, timeout=max(1, math.ceil(ttl)))

    def clear(self):
        # Entries expire on their own; a full clear would hit unrelated keys
        pass


class FixedWindowRateLimiter:
    """
    Fixed-window counter per key.

    Args:
        store: RateLimitStore holding the window records
        max_requests: Requests allowed per window
        window_seconds: Window length
        clock: Callable returning the current time in seconds
    """

    def __init__(self, store, max_requests, window_seconds, clock=time.time):
        self.store = store
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._lock = threading.Lock()

    def check(self, key):
        """
        Count a request against ``key``.

        Returns:
            tuple: (is_allowed, retry_after_seconds)
        """
        with self._lock:
            now = self.clock()
            record = self.store.get(key)

            # No record or window expired: start a new window
            if record is None or now > record['reset_at']:
                self.store.set(
                    key,
                    {'count': 1, 'reset_at': now + self.window_seconds},
                    ttl=self.window_seconds,
                )
                return True, 0

            remaining = record['reset_at'] - now
            if record['count'] >= self.max_requests:
                return False, max(1, math.ceil(remaining))

            record['count'] += 1
            self.store.set(key, record, ttl=remaining)
            return True, 0


_contact_rate_limiter = None


def get_contact_rate_limiter():
    """Process-wide limiter built from the CONTACT_FORM_RATE_LIMIT setting."""
    global _contact_rate_limiter
    if _contact_rate_limiter is None:
        config = settings.CONTACT_FORM_RATE_LIMIT
        store_class = import_string(config['STORE'])
        _contact_rate_limiter = FixedWindowRateLimiter(
            store=store_class(),
            max_requests=config['MAX_REQUESTS'],
            window_seconds=config['WINDOW_SECONDS'],
        )
    return _contact_rate_limiter


def reset_contact_rate_limiter():
    """Drop the process-wide limiter and its counters."""
    global _contact_rate_limiter
    if _contact_rate_limiter is not None:
        _contact_rate_limiter.store.clear()
    _contact_rate_limiter = None


@receiver(setting_changed)
def _rebuild_on_setting_change(sender, setting, **kwargs):
    if setting == 'CONTACT_FORM_RATE_LIMIT':
        reset_contact_rate_limiter()


def rate_limit_contact_form(get_limiter=get_contact_rate_limiter):
    """
    Decorator for rate limiting contact form submissions by client IP.

    Every request counts, valid or not, and the check runs before the
    view does any work.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(self, request, *args, **kwargs):
            ip = get_client_ip(request)
            allowed, retry_after = get_limiter().check(f"ip:{ip}")
            if not allowed:
                logger.warning(f"Contact form rate limit exceeded for {ip}")
                return Response(
                    {
                        'success': False,
                        'error': 'Too many requests',
                        'message': 'You have exceeded the maximum number of submissions. Please try again later.',
                        'retry_after': retry_after
                    },
                    status=status.HTTP_429_TOO_MANY_REQUESTS,
                    headers={'Retry-After': str(retry_after)}
                )

            return view_func(self, request, *args, **kwargs)

        return wrapped_view
    return decorator
