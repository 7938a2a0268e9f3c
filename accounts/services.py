"""
Authentication services for admin login and bearer tokens.
"""
import logging

from django.contrib.auth import authenticate, get_user_model
from django.utils import timezone
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)

AdminUser = get_user_model()


class AdminAuthService:
    """Credential checks and token handling for admin users."""

    @staticmethod
    def authenticate(request, username, password):
        """
        Return the admin for valid credentials, otherwise None.

        Goes through Django's ModelBackend, which runs the password hasher
        even when the username does not exist, so a miss and a wrong
        password take comparable time.
        """
        user = authenticate(request, username=username, password=password)
        if user is None:
            logger.warning(f"Failed admin login for username '{username}'")
            return None
        return user

    @staticmethod
    def record_login(user):
        """Stamp the successful login."""
        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])
        logger.info(f"Admin '{user.username}' logged in")

    @staticmethod
    def issue_token(user):
        """Signed access token carrying the admin's id and username."""
        token = AccessToken.for_user(user)
        # Numeric id, not simplejwt's stringified default
        token['userId'] = user.id
        token['username'] = user.username
        return str(token)

    @staticmethod
    def decode_token(raw_token):
        """
        Validate signature and expiry.

        Returns the token payload, or None when the token is invalid.
        """
        try:
            return AccessToken(raw_token)
        except TokenError:
            return None

    @staticmethod
    def get_admin_for_token(token):
        """Current admin named by the token, or None if it was removed."""
        username = token.get('username')
        if not username:
            return None
        return AdminUser.objects.filter(username=username).first()
