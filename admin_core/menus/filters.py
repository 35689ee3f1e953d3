"""
Filters for menu lists and trees.
"""

import django_filters

from admin_core.accounts.models import AccountType
from admin_core.core.filters import AdminFilterSet

from .models import Menu


class MenuFilter(AdminFilterSet):
    menu_name = django_filters.CharFilter(lookup_expr='icontains')
    menu_key = django_filters.CharFilter(lookup_expr='icontains')
    account_type = django_filters.ChoiceFilter(choices=AccountType.choices)
    menu_type = django_filters.ChoiceFilter(choices=Menu.MenuType.choices)
    status = django_filters.NumberFilter()
    module_id = django_filters.NumberFilter()
    parent_id = django_filters.NumberFilter()

    class Meta:
        model = Menu
        fields = []


class MenuTreeFilter(AdminFilterSet):
    """Trees are built whole, so only the columns that pick a tree apply."""
    account_type = django_filters.ChoiceFilter(choices=AccountType.choices)
    status = django_filters.NumberFilter()
    module_id = django_filters.NumberFilter()

    class Meta:
        model = Menu
        fields = []
