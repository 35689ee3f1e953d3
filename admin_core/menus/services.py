"""
Menu services.

Navigation assembly for the signed-in account, menu maintenance and the
role menu picker. Every tree is produced by ``core.trees.build_tree``.
"""

from collections import OrderedDict
from typing import Any, Dict, Iterable, List

from django.db.models import F, OuterRef, Subquery
from django.db.models.functions import Coalesce

from admin_core.accounts.models import AccountType, Role, UserRole
from admin_core.core.services import BaseService, ValidationServiceError
from admin_core.core.trees import build_tree, collect_descendant_ids, compact
from admin_core.modules.models import AccountModule, Module

from .filters import MenuFilter, MenuTreeFilter
from .models import Menu, ModuleMenu, RoleMenu
from .serializers import MenuSerializer

UNCATEGORIZED = {
    'module_id': 0,
    'module_name': 'Uncategorized',
    'module_alias': 'uncategorized',
}


def _to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationServiceError(f"Invalid {name}: {value}")


def _to_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def route_node(menu: Menu) -> Dict[str, Any]:
    """Front-end route for one menu; blank attributes are left out."""
    return compact({
        'path': menu.menu_path,
        'name': menu.menu_key,
        'title': menu.menu_name,
        'icon': menu.menu_icon,
        'component': menu.component,
        'redirect': menu.redirect,
    })


def picker_node(menu: Menu) -> Dict[str, Any]:
    return {
        'menu_id': menu.pk,
        'menu_name': menu.menu_name,
        'menu_key': menu.menu_key,
        'menu_type': menu.menu_type,
        'parent_id': menu.parent_id,
        'is_required': int(menu.is_required),
    }


def module_route_path(module: Module, menus: Iterable[Menu]) -> str:
    """``/<first segment>`` of the first menu path, else ``/<alias or lowercase name>``."""
    for menu in menus:
        if not menu.menu_path:
            continue
        first = menu.menu_path.strip('/').split('/')[0]
        if first:
            return f'/{first}'
    return f'/{module.slug}'


class MenuService(BaseService):
    """
    Menus, navigation and role menu assignment.
    """

    # Navigation

    def visible_menus(self, account) -> List[Menu]:
        """
        Enabled menus the account may see, in ``(sort, id)`` order.

        Super administrators see every admin menu. Other accounts see the
        menus of their enabled roles plus the required menus of their
        account type. Duplicate ``menu_key`` values keep the first row.
        """
        if account.is_super_admin:
            queryset = Menu.objects.filter(account_type=AccountType.ADMIN, status=1)
        else:
            role_ids = UserRole.objects.filter(account=account, role__status=1).values('role_id')
            role_menu_ids = set(RoleMenu.objects.filter(role_id__in=role_ids).values_list('menu_id', flat=True))
            required_ids = set(
                Menu.objects.filter(account_type=account.account_type, is_required=True, status=1)
                .values_list('id', flat=True)
            )
            menu_ids = role_menu_ids | required_ids
            if not menu_ids:
                return []
            queryset = Menu.objects.filter(id__in=menu_ids, status=1)

        unique = OrderedDict()
        for menu in queryset.order_by('sort', 'id'):
            key = menu.menu_key or menu.menu_name
            if key not in unique:
                unique[key] = menu
        return list(unique.values())

    def visible_modules(self, account) -> List[Module]:
        """
        Enabled, installed modules for the account, in ``(sort, id)`` order.

        Super administrators get every such module, sorted by their own
        position when they have one and by the module priority otherwise.
        """
        if account.is_super_admin:
            account_sort = AccountModule.objects.filter(account=account, module=OuterRef('pk')).values('sort')[:1]
            queryset = (
                Module.objects.filter(status=1, is_installed=True)
                .annotate(menu_sort=Coalesce(Subquery(account_sort), F('priority')))
                .order_by('menu_sort', 'id')
            )
            modules = list(queryset)
        else:
            links = (
                AccountModule.objects
                .filter(account=account, module__status=1, module__is_installed=True)
                .select_related('module')
                .order_by('sort', 'module_id')
            )
            modules = []
            for link in links:
                link.module.menu_sort = link.sort
                modules.append(link.module)

        seen = set()
        unique = []
        for module in modules:
            if module.pk not in seen:
                seen.add(module.pk)
                unique.append(module)
        return unique

    def get_user_menus(self) -> List[Dict[str, Any]]:
        """Navigation grouped by module: ``[{path, name, icon?, routes}]``."""
        account = self._require_user()
        menus_by_module: Dict[Any, List[Menu]] = {}
        for menu in self.visible_menus(account):
            menus_by_module.setdefault(menu.module_id, []).append(menu)

        result = []
        for module in self.visible_modules(account):
            module_menus = menus_by_module.get(module.pk)
            if not module_menus:
                continue

            module_menus.sort(key=lambda m: (m.sort, m.pk))
            item = {
                'path': module_route_path(module, module_menus),
                'name': module.title or module.name,
            }
            if module.icon:
                item['icon'] = module.icon

            routes = build_tree(module_menus, node=route_node, children_key='routes')
            if routes:
                item['routes'] = routes
            result.append(item)
        return result

    def get_user_menu_tree(self) -> List[Dict[str, Any]]:
        """The same visible menus as one route tree, without module grouping."""
        account = self._require_user()
        return build_tree(self.visible_menus(account), node=route_node, children_key='routes')

    # Maintenance

    def page(self, params) -> Dict[str, Any]:
        queryset = MenuFilter.apply(params, Menu.objects.select_related('module'))
        return self.paginate(queryset.order_by('sort', 'id'), params, MenuSerializer)

    def tree(self, params) -> List[Dict[str, Any]]:
        queryset = MenuTreeFilter.apply(params, Menu.objects.select_related('module'))
        return build_tree(list(queryset), node=lambda menu: dict(MenuSerializer(menu).data))

    def dir_tree(self, params) -> List[Dict[str, Any]]:
        queryset = MenuTreeFilter.apply(
            {key: params.get(key) for key in ('account_type', 'status')},
            Menu.objects.filter(menu_type=Menu.MenuType.DIR),
        )
        return build_tree(list(queryset), node=lambda menu: {
            'id': menu.pk,
            'menu_name': menu.menu_name,
            'menu_key': menu.menu_key,
            'parent_id': menu.parent_id,
        })

    def get_menu(self, menu_id) -> Menu:
        if menu_id in (None, ''):
            raise ValidationServiceError("Missing required fields: id")
        return self.get_or_404(Menu, message="Menu not found", pk=_to_int(menu_id, 'id'))

    def _check_parent(self, parent_id: int, account_type: str) -> None:
        if not parent_id:
            return
        parent = Menu.objects.filter(pk=parent_id).first()
        if parent is None:
            raise ValidationServiceError("Parent menu does not exist")
        if parent.account_type != account_type:
            raise ValidationServiceError("Parent menu belongs to another account type")

    def _check_key(self, account_type: str, menu_key: str, exclude_id=None, include_deleted=False) -> None:
        """
        A soft-deleted menu still holds its key. ``add`` revives such a row,
        so it checks live menus only; renames must check every row.
        """
        manager = Menu.all_objects if include_deleted else Menu.objects
        others = manager.filter(account_type=account_type, menu_key=menu_key)
        if exclude_id is not None:
            others = others.exclude(pk=exclude_id)
        if others.exists():
            raise ValidationServiceError(f"Menu key {menu_key} already exists")

    def _clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        values = {}
        for field in ('menu_name', 'menu_key', 'menu_path', 'menu_icon'):
            if field in data and data[field] is not None:
                values[field] = str(data[field]).strip()
        for field in ('menu_name', 'menu_key'):
            if field in data and not values.get(field):
                raise ValidationServiceError(f"{field} cannot be blank")
        for field in ('component', 'redirect'):
            if field in data:
                values[field] = data[field] or None
        if data.get('menu_type') not in (None, ''):
            if data['menu_type'] not in Menu.MenuType.values:
                raise ValidationServiceError(f"Invalid menu_type: {data['menu_type']}")
            values['menu_type'] = data['menu_type']
        for field in ('sort', 'status'):
            if data.get(field) not in (None, ''):
                values[field] = _to_int(data[field], field)
        if data.get('is_required') not in (None, ''):
            values['is_required'] = _to_flag(data['is_required'])
        if 'module_id' in data:
            module_id = data.get('module_id') or None
            if module_id and not Module.objects.filter(pk=module_id).exists():
                raise ValidationServiceError("Module does not exist")
            values['module_id'] = module_id
        return values

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['menu_name', 'menu_key'])
        account_type = data.get('account_type') or AccountType.ADMIN
        if account_type not in AccountType.values:
            raise ValidationServiceError(f"Invalid account_type: {account_type}")
        parent_id = _to_int(data.get('parent_id') or 0, 'parent_id')

        values = self._clean(data)
        self._check_key(account_type, values['menu_key'])
        self._check_parent(parent_id, account_type)

        def _create():
            # A soft-deleted row still holds the unique key; reuse it.
            menu = Menu.all_objects.filter(account_type=account_type, menu_key=values['menu_key']).first()
            if menu is None:
                menu = Menu(account_type=account_type)
            for field, value in values.items():
                setattr(menu, field, value)
            menu.parent_id = parent_id
            menu.deleted_at = None
            menu.is_system = False
            menu.save()
            return menu

        menu = self._execute_with_transaction(_create)
        self._log_operation('add_menu', {'id': menu.pk, 'menu_key': menu.menu_key})
        return MenuSerializer(menu).data

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['id'])
        menu = self.get_menu(data['id'])
        values = self._clean(data)

        parent_id = menu.parent_id
        if 'parent_id' in data:
            parent_id = _to_int(data.get('parent_id') or 0, 'parent_id')
        if parent_id:
            if parent_id == menu.pk:
                raise ValidationServiceError("A menu cannot be its own parent")
            descendants = collect_descendant_ids(Menu.objects.values('id', 'parent_id'), menu.pk)
            if parent_id in descendants:
                raise ValidationServiceError("A menu cannot move below one of its descendants")
            self._check_parent(parent_id, menu.account_type)

        if values.get('menu_key'):
            self._check_key(menu.account_type, values['menu_key'], exclude_id=menu.pk, include_deleted=True)

        for field, value in values.items():
            setattr(menu, field, value)
        menu.parent_id = parent_id
        menu.save()

        self._log_operation('update_menu', {'id': menu.pk, 'fields': sorted(values)})
        return MenuSerializer(menu).data

    def delete(self, menu_id) -> Dict[str, Any]:
        menu = self.get_menu(menu_id)
        if menu.is_system:
            raise ValidationServiceError("System menus cannot be deleted")
        if Menu.objects.filter(parent_id=menu.pk).exists():
            raise ValidationServiceError("Menu has child menus and cannot be deleted")

        def _delete():
            RoleMenu.objects.filter(menu=menu).delete()
            ModuleMenu.objects.filter(menu=menu).delete()
            menu.delete()

        self._execute_with_transaction(_delete)
        self._log_operation('delete_menu', {'id': menu.pk, 'menu_key': menu.menu_key})
        return {'id': menu.pk}

    # Role menu picker

    def get_role_menus(self, role_id, account_type) -> Dict[str, Any]:
        """
        Menus of ``account_type`` grouped by module, plus the role's current selection.

        Menus without a module come first under an "Uncategorized" entry.
        """
        if role_id in (None, '') or not account_type:
            raise ValidationServiceError("Missing required fields: role_id, account_type")
        if account_type not in AccountType.values:
            raise ValidationServiceError(f"Invalid account_type: {account_type}")
        role = self.get_or_404(Role, message="Role not found", pk=_to_int(role_id, 'role_id'))

        menus = list(Menu.objects.filter(account_type=account_type, status=1).order_by('sort', 'id'))
        modules_with_menus = []

        orphans = [menu for menu in menus if not menu.module_id]
        if orphans:
            modules_with_menus.append({
                'module': dict(UNCATEGORIZED),
                'menus': build_tree(orphans, node=picker_node),
            })

        for module in Module.objects.filter(status=1).order_by('-priority', 'id'):
            module_menus = [menu for menu in menus if menu.module_id == module.pk]
            if not module_menus:
                continue
            modules_with_menus.append({
                'module': {
                    'module_id': module.pk,
                    'module_name': module.name,
                    'module_alias': module.alias,
                },
                'menus': build_tree(module_menus, node=picker_node),
            })

        checked = list(RoleMenu.objects.filter(role=role).order_by('menu_id').values_list('menu_id', flat=True))
        return {
            'modules_with_menus': modules_with_menus,
            'checked_menu_ids': checked,
        }

    def update_role_menus(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the menus of a role with ``menu_ids``."""
        self._require_params(data, ['role_id'])
        role = self.get_or_404(Role, message="Role not found", pk=_to_int(data['role_id'], 'role_id'))

        menu_ids = data.get('menu_ids') or []
        if isinstance(menu_ids, str):
            menu_ids = [part for part in menu_ids.split(',') if part.strip()]
        menu_ids = sorted({_to_int(menu_id, 'menu_id') for menu_id in menu_ids})

        existing = set(Menu.objects.filter(pk__in=menu_ids).values_list('id', flat=True))
        missing = [menu_id for menu_id in menu_ids if menu_id not in existing]
        if missing:
            raise ValidationServiceError(f"Menus do not exist: {', '.join(str(m) for m in missing)}")

        def _replace():
            RoleMenu.objects.filter(role=role).delete()
            RoleMenu.objects.bulk_create([RoleMenu(role=role, menu_id=menu_id) for menu_id in menu_ids])

        self._execute_with_transaction(_replace)
        self._log_operation('update_role_menus', {'role_id': role.pk, 'count': len(menu_ids)})
        return {'role_id': role.pk, 'menu_ids': menu_ids}
