"""
Tests for the contact form, its notification email and the admin
submission endpoints.
"""
from datetime import timedelta
from io import StringIO
from unittest import mock

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone
from rest_framework import status

from contact.models import ContactSubmission
from contact.rate_limiting import (
    CacheRateLimitStore,
    FixedWindowRateLimiter,
    InMemoryRateLimitStore,
    get_client_ip,
    get_contact_rate_limiter,
)
from contact.tasks import send_submission_notification

CONTACT_URL = '/api/contact'
SUBMISSIONS_URL = '/api/submissions'

VALID_FORM = {
    'name': 'Jo Smith',
    'email': 'jo@example.com',
    'message': 'Hello there, I like your work!',
}


def detail_url(submission_id):
    return f'{SUBMISSIONS_URL}/{submission_id}'


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


# ==============================================================================
# PUBLIC CONTACT FORM
# ==============================================================================

@pytest.mark.django_db
class TestContactFormSubmission:
    """Test POST /api/contact."""

    def test_submit_stores_row_and_returns_id(self, api_client):
        response = api_client.post(
            CONTACT_URL, VALID_FORM, format='json',
            REMOTE_ADDR='203.0.113.9', HTTP_USER_AGENT='pytest-browser'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['message'] == 'Thank you for your message! I will get back to you soon.'

        submission = ContactSubmission.objects.get(id=response.data['submissionId'])
        assert submission.name == 'Jo Smith'
        assert submission.ip_address == '203.0.113.9'
        assert submission.user_agent == 'pytest-browser'
        assert submission.is_read is False
        assert submission.is_archived is False
        assert submission.read_at is None
        assert submission.notes is None

    def test_submission_ids_increase(self, api_client):
        first = api_client.post(CONTACT_URL, VALID_FORM, format='json')
        second = api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert second.data['submissionId'] > first.data['submissionId']

    def test_values_are_trimmed(self, api_client):
        response = api_client.post(
            CONTACT_URL,
            {'name': '  Jo Smith  ', 'email': 'jo@example.com', 'message': '   Hello there, friend   '},
            format='json'
        )

        submission = ContactSubmission.objects.get(id=response.data['submissionId'])
        assert submission.name == 'Jo Smith'
        assert submission.message == 'Hello there, friend'

    def test_message_too_short(self, api_client):
        response = api_client.post(
            CONTACT_URL, {**VALID_FORM, 'message': 'Too short'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['error'] == 'Validation failed'
        assert 'message' in response.data['fields']
        assert ContactSubmission.objects.count() == 0

    def test_padding_does_not_count_towards_length(self, api_client):
        response = api_client.post(
            CONTACT_URL, {**VALID_FORM, 'name': '   J   '}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data['fields']

    def test_invalid_email(self, api_client):
        response = api_client.post(
            CONTACT_URL, {**VALID_FORM, 'email': 'not-an-email'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['fields']['email'] == ['Invalid email address']

    def test_message_too_long(self, api_client):
        response = api_client.post(
            CONTACT_URL, {**VALID_FORM, 'message': 'x' * 5001}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'message' in response.data['fields']

    def test_boundary_lengths_are_accepted(self, api_client):
        response = api_client.post(
            CONTACT_URL,
            {'name': 'Jo', 'email': 'jo@example.com', 'message': 'x' * 5000},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK

    def test_forwarded_for_first_hop_is_stored(self, api_client):
        response = api_client.post(
            CONTACT_URL, VALID_FORM, format='json',
            HTTP_X_FORWARDED_FOR='198.51.100.20, 10.0.0.1', REMOTE_ADDR='10.0.0.2'
        )

        submission = ContactSubmission.objects.get(id=response.data['submissionId'])
        assert submission.ip_address == '198.51.100.20'

    def test_unparseable_client_address_is_stored_as_null(self, api_client):
        response = api_client.post(
            CONTACT_URL, VALID_FORM, format='json', HTTP_X_FORWARDED_FOR='garbage'
        )

        assert response.status_code == status.HTTP_200_OK
        submission = ContactSubmission.objects.get(id=response.data['submissionId'])
        assert submission.ip_address is None

    def test_no_token_needed(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')
        response = api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert response.status_code == status.HTTP_200_OK


# ==============================================================================
# RATE LIMITING
# ==============================================================================

@pytest.mark.django_db
class TestContactFormRateLimit:
    """Test the per-IP limit on POST /api/contact."""

    def test_fourth_request_in_window_is_rejected(self, api_client):
        for _ in range(3):
            response = api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')
            assert response.status_code == status.HTTP_200_OK

        response = api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.data['error'] == 'Too many requests'
        assert 0 < int(response['Retry-After']) <= 3600
        assert response.data['retry_after'] == int(response['Retry-After'])
        assert ContactSubmission.objects.count() == 3

    def test_invalid_requests_count_too(self, api_client):
        for _ in range(3):
            api_client.post(CONTACT_URL, {'name': 'x'}, format='json', REMOTE_ADDR='192.0.2.1')

        response = api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    def test_limits_are_per_ip(self, api_client):
        for _ in range(3):
            api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')

        response = api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.2')

        assert response.status_code == status.HTTP_200_OK

    def test_window_resets(self, api_client):
        clock = FakeClock()
        get_contact_rate_limiter().clock = clock

        for _ in range(3):
            api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')
        blocked = api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')

        clock.now += 3601
        allowed = api_client.post(CONTACT_URL, VALID_FORM, format='json', REMOTE_ADDR='192.0.2.1')

        assert blocked.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert allowed.status_code == status.HTTP_200_OK

    def test_limit_is_configurable(self, api_client, settings):
        settings.CONTACT_FORM_RATE_LIMIT = {
            'STORE': 'contact.rate_limiting.InMemoryRateLimitStore',
            'MAX_REQUESTS': 1,
            'WINDOW_SECONDS': 60,
        }

        first = api_client.post(CONTACT_URL, VALID_FORM, format='json')
        second = api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert int(second['Retry-After']) <= 60


class TestFixedWindowRateLimiter:
    """Test the limiter against a controllable clock."""

    def test_allows_up_to_max_then_blocks(self):
        limiter = FixedWindowRateLimiter(InMemoryRateLimitStore(), 3, 60, clock=FakeClock())

        results = [limiter.check('ip:1.2.3.4') for _ in range(4)]

        assert results[:3] == [(True, 0)] * 3
        assert results[3] == (False, 60)

    def test_retry_after_counts_down(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(InMemoryRateLimitStore(), 1, 60, clock=clock)
        limiter.check('k')

        clock.now += 20.5
        allowed, retry_after = limiter.check('k')

        assert allowed is False
        assert retry_after == 40

    def test_window_is_fixed_not_sliding(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(InMemoryRateLimitStore(), 2, 60, clock=clock)

        limiter.check('k')
        clock.now += 59
        limiter.check('k')
        clock.now += 2

        # A new window started 60s after the first request
        assert limiter.check('k') == (True, 0)

    def test_blocked_requests_do_not_extend_window(self):
        clock = FakeClock()
        limiter = FixedWindowRateLimiter(InMemoryRateLimitStore(), 1, 60, clock=clock)
        limiter.check('k')

        for _ in range(5):
            clock.now += 10
            limiter.check('k')
        clock.now += 11

        assert limiter.check('k') == (True, 0)

    def test_cache_store_shares_counts(self):
        clock = FakeClock()
        first = FixedWindowRateLimiter(CacheRateLimitStore('test-rl'), 2, 60, clock=clock)
        second = FixedWindowRateLimiter(CacheRateLimitStore('test-rl'), 2, 60, clock=clock)

        first.check('k')
        second.check('k')

        assert first.check('k')[0] is False


class TestGetClientIp:
    def test_prefers_first_forwarded_hop(self, rf):
        request = rf.get('/', HTTP_X_FORWARDED_FOR=' 203.0.113.5 , 10.0.0.1', REMOTE_ADDR='10.0.0.2')
        assert get_client_ip(request) == '203.0.113.5'

    def test_falls_back_to_remote_addr(self, rf):
        request = rf.get('/', REMOTE_ADDR='10.0.0.2')
        assert get_client_ip(request) == '10.0.0.2'

    def test_unknown_when_nothing_available(self, rf):
        request = rf.get('/')
        request.META.pop('REMOTE_ADDR', None)
        assert get_client_ip(request) == 'unknown'


# ==============================================================================
# NOTIFICATION EMAIL
# ==============================================================================

@pytest.mark.django_db
class TestSubmissionNotification:
    """Test the owner notification sent after a submission."""

    def test_email_sent_to_owner_with_reply_to(self, api_client, mailoutbox):
        api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert len(mailoutbox) == 1
        email = mailoutbox[0]
        assert email.to == ['owner@portfolio.test']
        assert email.from_email == 'noreply@portfolio.test'
        assert email.reply_to == ['jo@example.com']
        assert email.subject == 'New Contact Form Submission from Jo Smith'
        assert 'Hello there, I like your work!' in email.body

    def test_html_part_escapes_user_input(self, api_client, mailoutbox):
        api_client.post(
            CONTACT_URL,
            {**VALID_FORM, 'message': '<script>alert("hi")</script> please reply'},
            format='json'
        )

        html, mimetype = mailoutbox[0].alternatives[0]
        assert mimetype == 'text/html'
        assert '<script>' not in html
        assert '&lt;script&gt;' in html

    def test_line_breaks_in_name_are_folded_into_subject(self, api_client, mailoutbox):
        response = api_client.post(
            CONTACT_URL, {**VALID_FORM, 'name': 'Jo\nSmith\r\nBcc: x@evil.test'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(mailoutbox) == 1
        assert mailoutbox[0].subject == 'New Contact Form Submission from Jo Smith Bcc: x@evil.test'
        assert mailoutbox[0].bcc == []

    def test_send_failure_does_not_fail_request(self, api_client, mailoutbox):
        with mock.patch(
            'contact.tasks.EmailMultiAlternatives.send',
            side_effect=ConnectionRefusedError('smtp down')
        ):
            response = api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert ContactSubmission.objects.filter(id=response.data['submissionId']).exists()
        assert len(mailoutbox) == 0

    def test_broker_failure_does_not_fail_request(self, api_client):
        with mock.patch(
            'contact.tasks.send_submission_notification.delay',
            side_effect=OSError('broker unreachable')
        ):
            response = api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert ContactSubmission.objects.count() == 1

    def test_missing_submission_is_skipped(self, mailoutbox):
        send_submission_notification(123456)

        assert len(mailoutbox) == 0

    def test_send_test_notification_command(self, mailoutbox):
        out = StringIO()
        call_command('send_test_notification', '--name', 'Command Tester', stdout=out)

        assert 'Email sent successfully!' in out.getvalue()
        assert mailoutbox[0].subject == 'New Contact Form Submission from Command Tester'
        assert ContactSubmission.objects.count() == 0

    def test_send_test_notification_command_reports_failure(self):
        with mock.patch(
            'contact.tasks.EmailMultiAlternatives.send',
            side_effect=ConnectionRefusedError('smtp down')
        ):
            with pytest.raises(CommandError):
                call_command('send_test_notification', stdout=StringIO())


# ==============================================================================
# ADMIN SUBMISSION ENDPOINTS
# ==============================================================================

@pytest.mark.django_db
class TestSubmissionList:
    """Test GET /api/submissions."""

    def test_requires_token(self, api_client, make_submission):
        make_submission()

        response = api_client.get(SUBMISSIONS_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False

    def test_rejects_invalid_token(self, api_client, db):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')

        response = api_client.get(SUBMISSIONS_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_newest_first_with_pagination_metadata(self, admin_client, make_submission):
        now = timezone.now()
        older = make_submission(name='Older', submitted_at=now - timedelta(days=2))
        newer = make_submission(name='Newer', submitted_at=now - timedelta(days=1))

        response = admin_client.get(SUBMISSIONS_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert [s['id'] for s in response.data['submissions']] == [newer.id, older.id]
        assert response.data['pagination'] == {
            'page': 1,
            'limit': 20,
            'total': 2,
            'totalPages': 1,
            'hasMore': False,
        }

    def test_camel_case_fields(self, admin_client, make_submission):
        make_submission()

        response = admin_client.get(SUBMISSIONS_URL)

        item = response.data['submissions'][0]
        assert set(item) == {
            'id', 'name', 'email', 'message', 'ipAddress', 'userAgent',
            'submittedAt', 'isRead', 'isArchived', 'readAt', 'notes',
            'createdAt', 'updatedAt',
        }

    def test_pages(self, admin_client, make_submission):
        for i in range(5):
            make_submission(name=f'Sender {i}')

        response = admin_client.get(SUBMISSIONS_URL, {'page': 2, 'limit': 2})

        assert len(response.data['submissions']) == 2
        assert response.data['pagination'] == {
            'page': 2,
            'limit': 2,
            'total': 5,
            'totalPages': 3,
            'hasMore': True,
        }

    def test_page_past_the_end_is_empty(self, admin_client, make_submission):
        make_submission()

        response = admin_client.get(SUBMISSIONS_URL, {'page': 5})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['submissions'] == []
        assert response.data['pagination']['hasMore'] is False

    def test_limit_is_capped(self, admin_client, db):
        response = admin_client.get(SUBMISSIONS_URL, {'limit': 500})

        assert response.data['pagination']['limit'] == 100

    def test_bad_paging_values_fall_back_to_defaults(self, admin_client, db):
        response = admin_client.get(SUBMISSIONS_URL, {'page': 'abc', 'limit': '-3'})

        assert response.data['pagination']['page'] == 1
        assert response.data['pagination']['limit'] == 20

    def test_page_zero_falls_back_to_first_page(self, admin_client, make_submission):
        make_submission()

        response = admin_client.get(SUBMISSIONS_URL, {'page': '0'})

        assert response.data['pagination']['page'] == 1
        assert len(response.data['submissions']) == 1

    def test_filter_by_flags(self, admin_client, make_submission):
        read = make_submission(is_read=True)
        make_submission()
        archived = make_submission(is_archived=True)

        response = admin_client.get(SUBMISSIONS_URL, {'isRead': 'true'})
        assert [s['id'] for s in response.data['submissions']] == [read.id]

        response = admin_client.get(SUBMISSIONS_URL, {'isArchived': 'false'})
        assert response.data['pagination']['total'] == 2

        response = admin_client.get(SUBMISSIONS_URL, {'isArchived': 'true'})
        assert [s['id'] for s in response.data['submissions']] == [archived.id]

    def test_search_is_case_insensitive(self, admin_client, make_submission):
        match = make_submission(name='Jo Smith', email='jo@example.com')
        make_submission(name='Someone Else', email='else@example.com', message='Nothing relevant here.')

        response = admin_client.get(SUBMISSIONS_URL, {'search': 'SMITH'})

        assert [s['id'] for s in response.data['submissions']] == [match.id]

    def test_search_matches_message(self, admin_client, make_submission):
        match = make_submission(message='Do you build Django backends for hire?')
        make_submission()

        response = admin_client.get(SUBMISSIONS_URL, {'search': 'django back'})

        assert [s['id'] for s in response.data['submissions']] == [match.id]

    def test_search_matches_email(self, admin_client, make_submission):
        match = make_submission(name='Pat Lee', email='pat@studio-north.io')
        make_submission()

        response = admin_client.get(SUBMISSIONS_URL, {'search': 'Studio-North'})

        assert [s['id'] for s in response.data['submissions']] == [match.id]

    def test_deleted_admin_token_is_rejected(self, admin_client, admin_user, make_submission):
        make_submission()
        admin_user.delete()

        response = admin_client.get(SUBMISSIONS_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False


@pytest.mark.django_db
class TestSubmissionDetail:
    """Test GET and PATCH /api/submissions/:id."""

    def test_get(self, admin_client, make_submission):
        submission = make_submission()

        response = admin_client.get(detail_url(submission.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['submission']['email'] == 'jane@example.com'
        assert response.data['submission']['ipAddress'] == '198.51.100.7'

    def test_get_unknown_id(self, admin_client, db):
        response = admin_client.get(detail_url(99999))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {
            'success': False,
            'error': 'Not found',
            'message': 'Submission not found',
        }

    def test_deleted_admin_token_is_rejected(self, admin_client, admin_user, make_submission):
        submission = make_submission()
        admin_user.delete()

        get_response = admin_client.get(detail_url(submission.id))
        patch_response = admin_client.patch(detail_url(submission.id), {'isRead': True}, format='json')

        assert get_response.status_code == status.HTTP_401_UNAUTHORIZED
        assert patch_response.status_code == status.HTTP_401_UNAUTHORIZED
        submission.refresh_from_db()
        assert submission.is_read is False

    def test_requires_token(self, api_client, make_submission):
        submission = make_submission()

        assert api_client.get(detail_url(submission.id)).status_code == status.HTTP_401_UNAUTHORIZED
        assert api_client.patch(
            detail_url(submission.id), {'isRead': True}, format='json'
        ).status_code == status.HTTP_401_UNAUTHORIZED

    def test_mark_read_stamps_read_at_once(self, admin_client, make_submission):
        submission = make_submission()

        response = admin_client.patch(detail_url(submission.id), {'isRead': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['submission']['isRead'] is True
        submission.refresh_from_db()
        first_read_at = submission.read_at
        assert first_read_at is not None

        admin_client.patch(detail_url(submission.id), {'isRead': True}, format='json')
        submission.refresh_from_db()
        assert submission.read_at == first_read_at

    def test_mark_unread_keeps_read_at(self, admin_client, make_submission):
        submission = make_submission()
        admin_client.patch(detail_url(submission.id), {'isRead': True}, format='json')

        response = admin_client.patch(detail_url(submission.id), {'isRead': False}, format='json')

        assert response.data['submission']['isRead'] is False
        assert response.data['submission']['readAt'] is not None

    def test_archive_and_notes(self, admin_client, make_submission):
        submission = make_submission()

        response = admin_client.patch(
            detail_url(submission.id),
            {'isArchived': True, 'notes': 'Replied by phone'},
            format='json'
        )

        assert response.data['submission']['isArchived'] is True
        assert response.data['submission']['notes'] == 'Replied by phone'
        assert response.data['submission']['isRead'] is False
        assert response.data['submission']['readAt'] is None

    def test_empty_patch_changes_nothing(self, admin_client, make_submission):
        submission = make_submission()
        updated_at = submission.updated_at

        response = admin_client.patch(detail_url(submission.id), {}, format='json')

        assert response.status_code == status.HTTP_200_OK
        submission.refresh_from_db()
        assert submission.updated_at == updated_at

    def test_unknown_keys_are_ignored(self, admin_client, make_submission):
        submission = make_submission()

        response = admin_client.patch(
            detail_url(submission.id), {'name': 'Changed', 'isRead': True}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['submission']['name'] == 'Jane Doe'

    def test_notes_too_long(self, admin_client, make_submission):
        submission = make_submission()

        response = admin_client.patch(
            detail_url(submission.id), {'notes': 'x' * 1001}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'notes' in response.data['fields']

    def test_patch_unknown_id(self, admin_client, db):
        response = admin_client.patch(detail_url(99999), {'isRead': True}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_put_not_allowed(self, admin_client, make_submission):
        submission = make_submission()

        response = admin_client.put(detail_url(submission.id), {'isRead': True}, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


@pytest.mark.django_db
class TestHealthCheck:
    def test_health(self, api_client):
        response = api_client.get('/api/health')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['env']['hasJwtSecret'] is True
        assert response.data['env']['hasAdminEmail'] is True

    def test_database_flag_reflects_environment(self, api_client, monkeypatch):
        monkeypatch.delenv('DB_NAME', raising=False)
        monkeypatch.delenv('DATABASE_URL', raising=False)
        assert api_client.get('/api/health').data['env']['hasDatabase'] is False

        monkeypatch.setenv('DB_NAME', 'portfolio')
        assert api_client.get('/api/health').data['env']['hasDatabase'] is True


@pytest.mark.django_db
class TestCorsPreflight:
    """Browsers on another origin can reach the write endpoints."""

    ORIGIN = 'https://portfolio.example'

    @pytest.mark.parametrize('url,method', [
        (CONTACT_URL, 'POST'),
        ('/api/auth/login', 'POST'),
        (f'{SUBMISSIONS_URL}/1', 'PATCH'),
    ])
    def test_preflight_is_answered(self, api_client, url, method):
        response = api_client.options(
            url,
            HTTP_ORIGIN=self.ORIGIN,
            HTTP_ACCESS_CONTROL_REQUEST_METHOD=method,
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS='authorization,content-type',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response['Access-Control-Allow-Origin'] in ('*', self.ORIGIN)
        assert method in response['Access-Control-Allow-Methods']

    def test_preflight_does_not_use_up_rate_limit(self, api_client):
        for _ in range(5):
            api_client.options(
                CONTACT_URL,
                HTTP_ORIGIN=self.ORIGIN,
                HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
            )

        response = api_client.post(CONTACT_URL, VALID_FORM, format='json')

        assert response.status_code == status.HTTP_200_OK
