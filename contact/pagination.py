"""
Pagination for the submissions list.
"""
import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class SubmissionPagination(PageNumberPagination):
    """
    ?page=<n>&limit=<n> with the limit capped at 100.

    Out-of-range pages return an empty list instead of a 404, and the
    response carries ``{page, limit, total, totalPages, hasMore}``.
    """

    page_size = 20
    page_size_query_param = 'limit'
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        self.limit = self.get_page_size(request)
        self.page_number = self._parse_page(request.query_params.get(self.page_query_param))

        self.total = queryset.count()
        offset = (self.page_number - 1) * self.limit
        return list(queryset[offset:offset + self.limit])

    @staticmethod
    def _parse_page(raw):
        """Positive page number, or 1 for anything else."""
        try:
            page = int(raw)
        except (TypeError, ValueError):
            return 1
        return page if page > 0 else 1

    def get_paginated_response(self, data):
        total_pages = math.ceil(self.total / self.limit)
        return Response({
            'success': True,
            'submissions': data,
            'pagination': {
                'page': self.page_number,
                'limit': self.limit,
                'total': self.total,
                'totalPages': total_pages,
                'hasMore': self.page_number < total_pages,
            },
        })
