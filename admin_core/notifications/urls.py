"""
Notification URLs
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    AnnouncementViewSet,
    MessageViewSet,
    NotificationReadViewSet,
    SystemNotificationViewSet,
)

app_name = 'notifications'

router = DefaultRouter()
router.register('announcements', AnnouncementViewSet, basename='announcement')
router.register('system-notifications', SystemNotificationViewSet, basename='system-notification')
router.register('messages', MessageViewSet, basename='message')
router.register('reads', NotificationReadViewSet, basename='notification-read')

urlpatterns = [
    path('', include(router.urls)),
]
