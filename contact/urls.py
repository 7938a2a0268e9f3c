"""
Contact Management URL Configuration
"""
from django.urls import path
from .views import (
    ContactFormSubmitView,
    ContactSubmissionListView,
    ContactSubmissionDetailView,
)

app_name = 'contact'

urlpatterns = [
    # Public (no auth required)
    path('contact', ContactFormSubmitView.as_view(), name='submit'),

    # Admin (Bearer token required)
    path('submissions', ContactSubmissionListView.as_view(), name='list'),
    path('submissions/<int:id>', ContactSubmissionDetailView.as_view(), name='detail'),
]
