"""
Filters for notice lists and read records.
"""

import django_filters
from django.db.models import Q

from admin_core.core.filters import (
    AdminFilterSet,
    DateFromToFilter,
    DateTimeFromToFilter,
    ValueListFilter,
)

from .models import Announcement, Message, NotificationRead, SystemNotification


class NoticeFilter(AdminFilterSet):
    """Columns every notice list shares; ``date_range`` and ``time_range`` bound ``created_at``."""
    title = django_filters.CharFilter(lookup_expr='icontains')
    status = django_filters.NumberFilter()
    date_range = DateFromToFilter(field_name='created_at')
    time_range = DateTimeFromToFilter(field_name='created_at')


class AnnouncementFilter(NoticeFilter):
    position = django_filters.CharFilter(lookup_expr='icontains')
    target_platform = django_filters.CharFilter(lookup_expr='icontains')

    class Meta:
        model = Announcement
        fields = []


class SystemNotificationFilter(NoticeFilter):
    type = django_filters.CharFilter()
    target_platform = django_filters.CharFilter(lookup_expr='icontains')

    class Meta:
        model = SystemNotification
        fields = []


class MessageFilter(NoticeFilter):
    sender_id = django_filters.NumberFilter()
    receiver_id = django_filters.NumberFilter()
    target_platform = ValueListFilter(method='filter_target_platform')

    class Meta:
        model = Message
        fields = []

    def filter_target_platform(self, queryset, name, value):
        # Several platforms may be asked for at once; any of them matches.
        query = Q()
        for platform in value:
            query |= Q(target_platform__icontains=platform)
        return queryset.filter(query)


class NotificationReadFilter(AdminFilterSet):
    account_id = django_filters.NumberFilter()
    read_at = DateFromToFilter()
    date_range = DateFromToFilter(field_name='read_at')
    time_range = DateTimeFromToFilter(field_name='read_at')

    class Meta:
        model = NotificationRead
        fields = []
