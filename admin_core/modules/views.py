"""
Module System Views
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from admin_core.core.permissions import IsAdminAccount, IsSuperAdmin
from admin_core.core.views import ServiceViewSet

from .services import AppService


class ModuleViewSet(ServiceViewSet):
    """
    Module marketplace.

    Lists modules, installs them for the current account, keeps the
    account's ordering and uninstalls or rescans them.
    """
    service_class = AppService
    permission_classes = [IsAdminAccount]

    def get_permissions(self):
        if self.action in ('uninstall', 'sync'):
            return [IsSuperAdmin()]
        return super().get_permissions()

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    @action(detail=False, methods=['get'], url_path='my-apps')
    def my_apps(self, request):
        """Modules present on disk"""
        return Response(self.get_service().my_apps(request.query_params.get('keyword')))

    @action(detail=False, methods=['get', 'post'])
    def sort(self, request):
        service = self.get_service()
        if request.method == 'POST':
            data = request.data
            sort_list = data.get('sort_list') if hasattr(data, 'get') else data
            return Response(service.update_modules_sort(sort_list))
        return Response(service.modules_sort())

    @action(detail=True, methods=['post'])
    def install(self, request, pk=None):
        return Response(self.get_service().install_module(pk), status=201)

    @action(detail=True, methods=['post'])
    def uninstall(self, request, pk=None):
        return Response(self.get_service().uninstall_module(pk))

    @action(detail=False, methods=['post'])
    def sync(self, request):
        return Response(self.get_service().sync(request.data.get('path')))
