"""
Account URLs
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    AccountTokenObtainPairView,
    ProfileViewSet,
    AdminViewSet,
    UserViewSet,
    RoleViewSet,
    DepartmentViewSet,
)

app_name = 'accounts'

router = DefaultRouter()
router.register('me', ProfileViewSet, basename='me')
router.register('admins', AdminViewSet, basename='admin')
router.register('users', UserViewSet, basename='user')
router.register('roles', RoleViewSet, basename='role')
router.register('departments', DepartmentViewSet, basename='department')

urlpatterns = [
    path('token/', AccountTokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('', include(router.urls)),
]
