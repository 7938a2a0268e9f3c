"""
Shared pytest fixtures.
"""
import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from accounts.models import AdminUser
from accounts.services import AdminAuthService
from contact.models import ContactSubmission
from contact.rate_limiting import reset_contact_rate_limiter


@pytest.fixture(autouse=True)
def clean_rate_limiter():
    """Fresh rate limit counters for every test."""
    reset_contact_rate_limiter()
    cache.clear()
    yield
    reset_contact_rate_limiter()
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return AdminUser.objects.create_user(
        username='admin',
        email='owner@portfolio.test',
        password='s3cret-pass'
    )


@pytest.fixture
def admin_token(admin_user):
    return AdminAuthService.issue_token(admin_user)


@pytest.fixture
def admin_client(admin_token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {admin_token}')
    return client


@pytest.fixture
def make_submission(db):
    def _make_submission(**overrides):
        data = {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'message': 'I would love to chat about a freelance project.',
            'ip_address': '198.51.100.7',
        }
        data.update(overrides)
        return ContactSubmission.objects.create(**data)
    return _make_submission
