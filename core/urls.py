"""
URL configuration for the portfolio contact API.

Public:
    POST /api/contact
    POST /api/auth/login
    GET  /api/auth/verify
    GET  /api/health

Admin (Bearer token):
    GET         /api/submissions
    GET, PATCH  /api/submissions/<id>
"""
from django.contrib import admin
from django.urls import path, include

from core.views import health_check

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health', health_check, name='health'),
    path('api/auth/', include('accounts.urls')),
    path('api/', include('contact.urls')),
]
