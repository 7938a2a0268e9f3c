from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LoginSerializer, AdminUserSerializer
from .services import AdminAuthService

INVALID_CREDENTIALS = {
    'success': False,
    'error': 'Invalid credentials',
    'message': 'Username or password is incorrect',
}


class LoginView(APIView):
    """
    Admin login.

    POST /api/auth/login

    Unknown usernames and wrong passwords get the same 401 body.
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {
                    'success': False,
                    'error': 'Validation failed',
                    'fields': serializer.errors
                },
                status=status.HTTP_400_BAD_REQUEST
            )

        user = AdminAuthService.authenticate(
            request,
            serializer.validated_data['username'],
            serializer.validated_data['password'],
        )
        if user is None:
            return Response(INVALID_CREDENTIALS, status=status.HTTP_401_UNAUTHORIZED)

        token = AdminAuthService.issue_token(user)
        AdminAuthService.record_login(user)

        return Response({
            'success': True,
            'token': token,
            'user': AdminUserSerializer(user).data,
        }, status=status.HTTP_200_OK)


class VerifyTokenView(APIView):
    """
    Check a bearer token and return the current admin profile.

    GET /api/auth/verify
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        auth_header = request.headers.get('Authorization', '')
        if not auth_header.startswith('Bearer '):
            return Response(
                {'valid': False, 'error': 'No token provided'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        token = AdminAuthService.decode_token(auth_header[len('Bearer '):].strip())
        if token is None:
            return Response(
                {'valid': False, 'error': 'Invalid or expired token'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        # A deleted admin is rejected even while the token is unexpired
        admin = AdminAuthService.get_admin_for_token(token)
        if admin is None:
            return Response(
                {'valid': False, 'error': 'User not found'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        return Response({
            'valid': True,
            'user': AdminUserSerializer(admin).data,
        }, status=status.HTTP_200_OK)
