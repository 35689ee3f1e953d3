"""
SMS URLs
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import SmsLogViewSet

app_name = 'sms'

router = DefaultRouter()
router.register('logs', SmsLogViewSet, basename='sms-log')

urlpatterns = [
    path('', include(router.urls)),
]
