"""
Menu Views
"""

from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from admin_core.core.permissions import IsAdminAccount, IsSuperAdmin
from admin_core.core.services import ValidationServiceError
from admin_core.core.views import ServiceViewSet
from admin_core.modules.manifest import module_dir

from .importer import MENU_CSV, MenuImportService
from .serializers import MenuSerializer
from .services import MenuService


class MenuViewSet(ServiceViewSet):
    """
    Navigation for the signed-in account and menu maintenance.

    ``user-menus`` and ``user-tree`` are open to any authenticated account;
    everything else needs an admin account and ``import`` a super admin.
    """
    service_class = MenuService
    permission_classes = [IsAdminAccount]

    def get_permissions(self):
        if self.action in ('user_menus', 'user_tree'):
            return [IsAuthenticated()]
        if self.action == 'import_menus':
            return [IsSuperAdmin()]
        return super().get_permissions()

    @action(detail=False, methods=['get'], url_path='user-menus')
    def user_menus(self, request):
        """Routes grouped by module"""
        return Response(self.get_service().get_user_menus())

    @action(detail=False, methods=['get'], url_path='user-tree')
    def user_tree(self, request):
        return Response(self.get_service().get_user_menu_tree())

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    def retrieve(self, request, pk=None):
        return Response(MenuSerializer(self.get_service().get_menu(pk)).data)

    def create(self, request):
        return Response(self.get_service().add(self.body()), status=201)

    def update(self, request, pk=None):
        return Response(self.get_service().update(self.body(id=pk)))

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    def destroy(self, request, pk=None):
        return Response(self.get_service().delete(pk))

    @action(detail=False, methods=['get'])
    def tree(self, request):
        return Response(self.get_service().tree(self.params()))

    @action(detail=False, methods=['get'], url_path='dir-tree')
    def dir_tree(self, request):
        return Response(self.get_service().dir_tree(self.params()))

    @action(detail=False, methods=['get', 'post'], url_path='role-menus')
    def role_menus(self, request):
        service = self.get_service()
        if request.method == 'POST':
            return Response(service.update_role_menus(self.body()))
        params = request.query_params
        return Response(service.get_role_menus(params.get('role_id'), params.get('account_type')))

    @action(detail=False, methods=['post'], url_path='import')
    def import_menus(self, request):
        """Import one module's ``data/menu.csv``, or every module's when no module is given"""
        data = self.body()
        service = MenuImportService(account_type=data.get('account_type'))
        module_name = data.get('module')
        if module_name:
            if '/' in module_name or module_name.startswith('.'):
                raise ValidationServiceError(f"Invalid module name: {module_name}")
            result = service.import_menus_from_csv(module_name, module_dir(module_name) / MENU_CSV)
        else:
            result = service.import_all_modules_menus()
        result['warnings'] = service.warnings
        return Response(result, status=200 if result['success'] else 400)
