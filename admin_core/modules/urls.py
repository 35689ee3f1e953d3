"""
Module System URLs
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ModuleViewSet

app_name = 'modules'

router = DefaultRouter()
router.register('apps', ModuleViewSet, basename='module')

urlpatterns = [
    path('', include(router.urls)),
]
