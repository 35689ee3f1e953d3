"""
Module marketplace services.
"""

from typing import Any, Dict, List, Optional

from django.db.models import Exists, OuterRef
from django.utils import timezone

from admin_core.core.services import BaseService, ValidationServiceError

from .exceptions import ModuleNotFoundError, ModuleStateError
from .filters import ModuleFilter
from .models import AccountModule, Module
from .puller import ModulePuller
from .scanner import my_apps, scan_and_update_modules
from .serializers import AccountModuleSortSerializer, ModuleSerializer
from .signals import module_installed
from .uninstaller import ModuleUninstaller


class AppService(BaseService):
    """
    Installing, ordering and removing modules for the current account.
    """

    def __init__(self, user=None, context=None, puller=None, uninstaller=None):
        super().__init__(user=user, context=context)
        self.puller = puller or ModulePuller()
        self.uninstaller = uninstaller or ModuleUninstaller()

    def page(self, params) -> Dict[str, Any]:
        queryset = ModuleFilter.apply(params, Module.objects.all())
        if self.user is not None and self.user.is_authenticated:
            queryset = queryset.annotate(account_installed=Exists(
                AccountModule.objects.filter(module=OuterRef('pk'), account=self.user)
            ))
        return self.paginate(queryset.order_by('-priority', 'id'), params, ModuleSerializer)

    def my_apps(self, keyword: Optional[str] = None) -> List[Dict[str, Any]]:
        return my_apps(keyword)

    def sync(self, path: Optional[str] = None) -> Dict[str, Any]:
        result = scan_and_update_modules(path)
        self._log_operation('sync_modules', {
            'success': len(result['success']),
            'failed': len(result['failed']),
        })
        return result

    def modules_sort(self) -> List[Dict[str, Any]]:
        account = self._require_user()
        links = (
            AccountModule.objects
            .filter(account=account, module__status=1, module__is_installed=True)
            .select_related('module')
            .order_by('sort', '-module__priority', 'module_id')
        )
        return AccountModuleSortSerializer(links, many=True).data

    def update_modules_sort(self, sort_list) -> Dict[str, Any]:
        """Give each listed module position ``index + 1``; entries without an id are skipped."""
        account = self._require_user()
        if not sort_list or not isinstance(sort_list, (list, tuple)):
            raise ValidationServiceError("Sort list cannot be empty")

        def _apply():
            updated = 0
            for index, item in enumerate(sort_list):
                module_id = item.get('module_id') if isinstance(item, dict) else None
                if not module_id:
                    continue
                updated += AccountModule.objects.filter(
                    account=account, module_id=module_id
                ).update(sort=index + 1)
            return updated

        updated = self._execute_with_transaction(_apply)
        self._log_operation('update_modules_sort', {'updated': updated})
        return {'updated': updated}

    def install_module(self, module_id) -> Dict[str, Any]:
        account = self._require_user()
        if not module_id:
            raise ValidationServiceError("Missing required fields: module_id")

        try:
            module = Module.objects.get(pk=module_id)
        except (Module.DoesNotExist, ValueError):
            raise ModuleNotFoundError(f"Module {module_id} does not exist")

        if AccountModule.objects.filter(account=account, module=module).exists():
            raise ModuleStateError(f"Module {module.name} is already installed")

        path = self.puller.pull(module)

        AccountModule.objects.create(account=account, module=module)
        if not module.is_installed:
            module.is_installed = True
            module.installed_at = module.installed_at or timezone.now()
            module.save(update_fields=['is_installed', 'installed_at', 'updated_at'])

        self._log_operation('install_module', {'module': module.name, 'path': str(path)})
        module_installed.send(sender=Module, module=module, account=account, path=str(path))

        return {
            'module_id': module.pk,
            'module_name': module.name,
            'module_path': str(path),
        }

    def uninstall_module(self, module_id) -> Dict[str, Any]:
        if not module_id:
            raise ValidationServiceError("Missing required fields: module_id")
        result = self.uninstaller.uninstall(module_id)
        self._log_operation('uninstall_module', result)
        return result
