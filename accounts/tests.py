"""
Tests for admin login and token verification.
"""
from datetime import timedelta
from unittest import mock

import pytest
from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import AdminUser
from accounts.services import AdminAuthService

LOGIN_URL = '/api/auth/login'
VERIFY_URL = '/api/auth/verify'


class TestAdminUserModel:
    """Test the admin account model."""

    def test_password_is_hashed_with_bcrypt(self, admin_user):
        assert admin_user.password.startswith('bcrypt')
        assert admin_user.check_password('s3cret-pass')

    def test_table_and_hash_column(self):
        assert AdminUser._meta.db_table == 'admin_users'
        assert AdminUser._meta.get_field('password').column == 'password_hash'

    def test_username_is_unique(self, admin_user):
        with pytest.raises(IntegrityError), transaction.atomic():
            AdminUser.objects.create_user(
                username='admin', email='other@portfolio.test', password='another-pass'
            )

    def test_create_user_requires_email(self, db):
        with pytest.raises(ValueError):
            AdminUser.objects.create_user(username='nomail', email='', password='whatever1')


class TestLogin:
    """Test POST /api/auth/login."""

    def test_login_success_returns_token_and_public_user(self, api_client, admin_user):
        response = api_client.post(
            LOGIN_URL, {'username': 'admin', 'password': 's3cret-pass'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['user'] == {
            'id': admin_user.id,
            'username': 'admin',
            'email': 'owner@portfolio.test',
        }
        assert 'password' not in response.data['user']

        token = AccessToken(response.data['token'])
        assert token['userId'] == admin_user.id
        assert token['username'] == 'admin'

    def test_token_expires_after_24_hours(self, api_client, admin_user):
        response = api_client.post(
            LOGIN_URL, {'username': 'admin', 'password': 's3cret-pass'}, format='json'
        )

        token = AccessToken(response.data['token'])
        assert token['exp'] - token['iat'] == int(timedelta(hours=24).total_seconds())

    def test_login_updates_last_login(self, api_client, admin_user):
        assert admin_user.last_login is None

        api_client.post(LOGIN_URL, {'username': 'admin', 'password': 's3cret-pass'}, format='json')

        admin_user.refresh_from_db()
        assert admin_user.last_login is not None

    def test_wrong_password_and_unknown_user_look_identical(self, api_client, admin_user):
        wrong_password = api_client.post(
            LOGIN_URL, {'username': 'admin', 'password': 'not-the-password'}, format='json'
        )
        unknown_user = api_client.post(
            LOGIN_URL, {'username': 'ghost', 'password': 'not-the-password'}, format='json'
        )

        assert wrong_password.status_code == status.HTTP_401_UNAUTHORIZED
        assert unknown_user.status_code == status.HTTP_401_UNAUTHORIZED
        assert wrong_password.data == unknown_user.data
        assert wrong_password.data['error'] == 'Invalid credentials'

        admin_user.refresh_from_db()
        assert admin_user.last_login is None

    def test_unknown_user_still_runs_password_hasher(self, api_client, admin_user):
        with mock.patch.object(AdminUser, 'set_password', autospec=True) as set_password:
            api_client.post(
                LOGIN_URL, {'username': 'ghost', 'password': 'not-the-password'}, format='json'
            )

        set_password.assert_called_once()

    def test_login_validation(self, api_client, db):
        response = api_client.post(LOGIN_URL, {'username': 'ab', 'password': '123'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Validation failed'
        assert 'username' in response.data['fields']
        assert 'password' in response.data['fields']

    def test_login_ignores_bad_bearer_header(self, api_client, admin_user):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')
        response = api_client.post(
            LOGIN_URL, {'username': 'admin', 'password': 's3cret-pass'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK

    def test_get_not_allowed(self, api_client, db):
        response = api_client.get(LOGIN_URL)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.data['success'] is False


class TestVerifyToken:
    """Test GET /api/auth/verify."""

    def test_token_from_login_is_accepted(self, api_client, admin_user):
        login = api_client.post(
            LOGIN_URL, {'username': 'admin', 'password': 's3cret-pass'}, format='json'
        )

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")
        response = api_client.get(VERIFY_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['valid'] is True
        assert response.data['user']['username'] == 'admin'

    def test_returns_current_profile(self, admin_client, admin_user):
        admin_user.email = 'new-address@portfolio.test'
        admin_user.save()

        response = admin_client.get(VERIFY_URL)

        assert response.data['user']['email'] == 'new-address@portfolio.test'

    def test_missing_token(self, api_client, db):
        response = api_client.get(VERIFY_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'valid': False, 'error': 'No token provided'}

    def test_tampered_token(self, api_client, admin_token):
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {admin_token[:-2]}xx')
        response = api_client.get(VERIFY_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid or expired token'

    def test_expired_token(self, api_client, admin_user):
        token = AccessToken.for_user(admin_user)
        token['username'] = admin_user.username
        token.set_exp(lifetime=-timedelta(seconds=1))

        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = api_client.get(VERIFY_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['valid'] is False

    def test_deleted_admin_is_rejected(self, admin_client, admin_user):
        admin_user.delete()

        response = admin_client.get(VERIFY_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'valid': False, 'error': 'User not found'}


class TestAdminAuthService:
    """Test token helpers directly."""

    def test_decode_rejects_garbage(self):
        assert AdminAuthService.decode_token('not-a-jwt') is None

    def test_get_admin_for_token(self, admin_user, admin_token):
        token = AdminAuthService.decode_token(admin_token)
        assert AdminAuthService.get_admin_for_token(token) == admin_user


class TestDjangoAdmin:
    """Admin accounts can use the Django admin site."""

    def test_submission_changelist_loads(self, client, admin_user, make_submission):
        make_submission()
        client.force_login(admin_user)

        response = client.get('/admin/contact/contactsubmission/')

        assert response.status_code == 200
        assert b'Jane Doe' in response.content
