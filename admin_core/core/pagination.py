"""
Page-number pagination for admin list endpoints.

Every list answers with ``{list, total, page, page_size}``.
"""

from typing import Any, Dict, Mapping, Optional

from django.core.paginator import EmptyPage
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def _positive_int(value: Any, default: int, cutoff: Optional[int] = None) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number <= 0:
        return default
    if cutoff:
        return min(number, cutoff)
    return number


class AdminPagination(PageNumberPagination):
    """
    Reads ``page`` (or ``current``) and ``pageSize`` (or ``page_size``).

    Bad numbers fall back to the first page and the default size; a page
    past the end is empty rather than an error.
    """
    page_query_params = ('page', 'current')
    page_size_query_params = ('pageSize', 'page_size')
    max_page_size = 1000

    def _first(self, params: Mapping, names) -> Any:
        for name in names:
            value = params.get(name)
            if value not in (None, ''):
                return value
        return None

    def page_number_for(self, params: Mapping) -> int:
        return _positive_int(self._first(params, self.page_query_params), 1)

    def page_size_for(self, params: Mapping) -> int:
        return _positive_int(
            self._first(params, self.page_size_query_params),
            self.page_size or 10,
            self.max_page_size,
        )

    def get_page_size(self, request):
        return self.page_size_for(request.query_params)

    def paginate(self, queryset, params: Mapping, serializer_class=None,
                 context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Return one page of ``queryset`` wrapped in the list envelope."""
        params = params or {}
        self.number = self.page_number_for(params)
        self.size = self.page_size_for(params)

        paginator = self.django_paginator_class(queryset, self.size)
        self.total = paginator.count
        try:
            items = paginator.page(self.number).object_list
        except EmptyPage:
            items = []

        if serializer_class is not None:
            items = serializer_class(items, many=True, context=context or {}).data
        else:
            items = list(items)
        return self.envelope(items)

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        page = self.paginate(queryset, request.query_params)
        return page['list']

    def envelope(self, items) -> Dict[str, Any]:
        return {
            'list': items,
            'total': self.total,
            'page': self.number,
            'page_size': self.size,
        }

    def get_paginated_response(self, data):
        return Response(self.envelope(data))

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'list': schema,
                'total': {'type': 'integer'},
                'page': {'type': 'integer'},
                'page_size': {'type': 'integer'},
            },
        }
