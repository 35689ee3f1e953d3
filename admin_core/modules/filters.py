"""
Filter for the module marketplace list.
"""

import django_filters

from admin_core.core.filters import AdminFilterSet

from .models import Module


class ModuleFilter(AdminFilterSet):
    name = django_filters.CharFilter(lookup_expr='icontains')
    title = django_filters.CharFilter(lookup_expr='icontains')
    status = django_filters.NumberFilter()
    is_installed = django_filters.BooleanFilter()
    pull_type = django_filters.ChoiceFilter(choices=Module.PullType.choices)
    keyword = django_filters.CharFilter(method='filter_keyword')

    search_fields = ('name', 'alias', 'title', 'description')

    class Meta:
        model = Module
        fields = []
