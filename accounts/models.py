from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models


class AdminUserManager(BaseUserManager):
    """Manager for admin accounts. Rows are created by operators, not the API."""

    def create_user(self, username, email, password=None, **extra_fields):
        if not username:
            raise ValueError('Admin users must have a username')
        if not email:
            raise ValueError('Admin users must have an email address')

        user = self.model(
            username=username,
            email=self.normalize_email(email),
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, email, password=None, **extra_fields):
        # Every admin account is already a superuser of this site
        return self.create_user(username, email, password, **extra_fields)


class AdminUser(AbstractBaseUser):
    """
    Site owner account for the submissions dashboard.

    The password column is named ``password_hash`` and stores a bcrypt
    hash produced by Django's hasher framework.
    """

    username = models.CharField(
        max_length=100,
        unique=True,
        help_text="Login name"
    )

    password = models.CharField(
        'password',
        max_length=255,
        db_column='password_hash'
    )

    email = models.EmailField(
        max_length=320,
        help_text="Contact address of the admin"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    # last_login (nullable) is inherited from AbstractBaseUser

    objects = AdminUserManager()

    USERNAME_FIELD = 'username'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['email']

    class Meta:
        db_table = 'admin_users'
        verbose_name = 'Admin User'
        verbose_name_plural = 'Admin Users'

    def __str__(self):
        return self.username

    # Django admin site integration: every admin has full access.
    @property
    def is_staff(self):
        return self.is_active

    @property
    def is_superuser(self):
        return self.is_active

    def has_perm(self, perm, obj=None):
        return self.is_active

    def has_module_perms(self, app_label):
        return self.is_active

