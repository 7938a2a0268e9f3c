"""
Query filters for the submissions list.
"""
from django_filters import rest_framework as filters
from django.db.models import Q

from .models import ContactSubmission


class ContactSubmissionFilter(filters.FilterSet):
    """
    ?isRead=true|false, ?isArchived=true|false, ?search=<text>

    Boolean values other than true/false (or 1/0) are ignored. ``search`` matches
    the whole string, case-insensitively, against name, email or message.
    """

    isRead = filters.BooleanFilter(field_name='is_read')
    isArchived = filters.BooleanFilter(field_name='is_archived')
    search = filters.CharFilter(method='filter_search')

    class Meta:
        model = ContactSubmission
        fields = ['isRead', 'isArchived', 'search']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(email__icontains=value) |
            Q(message__icontains=value)
        )
