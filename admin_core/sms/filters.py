"""
Filter for the SMS log list.
"""

import django_filters

from admin_core.core.filters import AdminFilterSet, DateFromToFilter

from .models import SmsLog, SmsType, SourceType


class SmsLogFilter(AdminFilterSet):
    account_id = django_filters.NumberFilter()
    source_type = django_filters.ChoiceFilter(choices=SourceType.choices)
    sms_type = django_filters.ChoiceFilter(choices=SmsType.choices)
    phone = django_filters.CharFilter(lookup_expr='icontains')
    status = django_filters.NumberFilter()
    ip_address = django_filters.CharFilter(lookup_expr='icontains')
    ip_location = django_filters.CharFilter(lookup_expr='icontains')
    date_range = DateFromToFilter(field_name='created_at')
    keyword = django_filters.CharFilter(method='filter_keyword')

    search_fields = ('phone', 'ip_address', 'ip_location', 'error_message')

    class Meta:
        model = SmsLog
        fields = []
