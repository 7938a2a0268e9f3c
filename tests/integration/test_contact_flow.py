"""
End-to-end flow: a visitor writes in, the owner logs in and reads it.
"""
import pytest
from rest_framework import status
from rest_framework.test import APIClient


@pytest.mark.django_db
def test_visitor_message_reaches_admin_dashboard(admin_user, mailoutbox):
    visitor = APIClient()
    response = visitor.post(
        '/api/contact',
        {'name': 'Jo Smith', 'email': 'jo@example.com', 'message': 'Hello there, I like your work!'},
        format='json',
        REMOTE_ADDR='203.0.113.50'
    )
    assert response.status_code == status.HTTP_200_OK
    submission_id = response.data['submissionId']
    assert len(mailoutbox) == 1

    owner = APIClient()
    login = owner.post(
        '/api/auth/login', {'username': 'admin', 'password': 's3cret-pass'}, format='json'
    )
    assert login.status_code == status.HTTP_200_OK
    owner.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")

    listing = owner.get('/api/submissions', {'isRead': 'false'})
    assert [s['id'] for s in listing.data['submissions']] == [submission_id]

    detail = owner.get(f'/api/submissions/{submission_id}')
    submission = detail.data['submission']
    assert submission['name'] == 'Jo Smith'
    assert submission['email'] == 'jo@example.com'
    assert submission['message'] == 'Hello there, I like your work!'
    assert submission['ipAddress'] == '203.0.113.50'
    assert submission['isRead'] is False
    assert submission['isArchived'] is False

    owner.patch(f'/api/submissions/{submission_id}', {'isRead': True}, format='json')
    unread = owner.get('/api/submissions', {'isRead': 'false'})
    assert unread.data['pagination']['total'] == 0
