from rest_framework import permissions


class IsAdminAccount(permissions.BasePermission):
    """Allow only authenticated accounts of the admin type."""

    message = 'Admin account required'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return getattr(user, 'account_type', None) == 'admin'


class IsSuperAdmin(IsAdminAccount):
    """Allow only super administrators."""

    message = 'Super administrator required'

    def has_permission(self, request, view):
        return super().has_permission(request, view) and request.user.is_super_admin
