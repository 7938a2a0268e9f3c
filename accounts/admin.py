from django.contrib import admin

from .models import AdminUser


@admin.register(AdminUser)
class AdminUserAdmin(admin.ModelAdmin):
    """Read-mostly view of admin accounts; the hash is never shown."""

    list_display = ('username', 'email', 'created_at', 'last_login')
    search_fields = ('username', 'email')
    ordering = ('username',)
    fields = ('username', 'email', 'created_at', 'last_login')
    readonly_fields = ('created_at', 'last_login')

    def has_add_permission(self, request):
        """Accounts are created with manage.py createsuperuser."""
        return False
