"""
Filters for account, role and department lists.
"""

import django_filters
from django.db.models import Q

from admin_core.core.filters import AdminFilterSet, DateFromToFilter, ValueListFilter

from .models import Account, AccountType, Department, Role


class AccountFilter(AdminFilterSet):
    """Filter for end user and administrator lists."""

    username = django_filters.CharFilter(lookup_expr='icontains')
    status = ValueListFilter(coerce=int)
    keyword = django_filters.CharFilter(method='filter_keyword')
    last_login_time = DateFromToFilter()
    created_at = DateFromToFilter()

    search_fields = ('username', 'last_login_ip', 'nickname', 'phone', 'email')

    class Meta:
        model = Account
        fields = []


class AdminFilter(AccountFilter):
    is_super = django_filters.BooleanFilter(method='filter_is_super')

    def filter_is_super(self, queryset, name, value):
        if value:
            return queryset.filter(admin_profile__is_super=True)
        return queryset.filter(Q(admin_profile__isnull=True) | Q(admin_profile__is_super=False))


class RoleFilter(AdminFilterSet):
    role_name = django_filters.CharFilter(lookup_expr='icontains')
    role_code = django_filters.CharFilter(lookup_expr='icontains')
    account_type = django_filters.ChoiceFilter(choices=AccountType.choices)
    status = django_filters.NumberFilter()

    class Meta:
        model = Role
        fields = []


class DepartmentFilter(AdminFilterSet):
    department_name = django_filters.CharFilter(lookup_expr='icontains')
    department_code = django_filters.CharFilter(lookup_expr='icontains')
    status = django_filters.NumberFilter()
    manager_id = django_filters.NumberFilter()

    class Meta:
        model = Department
        fields = []
