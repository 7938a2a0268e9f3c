from django.contrib.auth import get_user_model
from rest_framework import serializers

AdminUser = get_user_model()


class LoginSerializer(serializers.Serializer):
    """Serializer for admin login credentials."""
    username = serializers.CharField(
        min_length=3,
        max_length=100,
        error_messages={
            'min_length': 'Username must be at least 3 characters',
            'max_length': 'Username must be less than 100 characters',
        }
    )
    password = serializers.CharField(
        min_length=6,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'},
        error_messages={
            'min_length': 'Password must be at least 6 characters',
        }
    )


class AdminUserSerializer(serializers.ModelSerializer):
    """
    Public admin profile.
    The password hash is never part of the output.
    """

    class Meta:
        model = AdminUser
        fields = ('id', 'username', 'email')
        read_only_fields = fields
