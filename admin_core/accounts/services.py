"""
Account services.

Business rules for administrators, end users, roles and departments.
"""

from typing import Any, Dict, List

from admin_core.core.filters import param_list
from admin_core.core.services import (
    BaseService,
    NotFoundServiceError,
    ValidationServiceError,
)
from admin_core.core.trees import build_tree, collect_descendant_ids

from .filters import AccountFilter, AdminFilter, DepartmentFilter, RoleFilter
from .models import Account, AccountType, AdminProfile, Department, Role, UserRole
from .serializers import (
    AccountDetailSerializer,
    AccountSerializer,
    DepartmentSerializer,
    RoleSerializer,
)


def to_bool(value: Any) -> bool:
    """Interpret form style booleans (``'1'``, ``'true'``, ``1``, ``True``)."""
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def to_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationServiceError(f"Invalid {name}: {value}")


class AccountService(BaseService):
    """
    Shared account management for one ``account_type``.
    """
    account_type = None
    label = 'account'
    filterset_class = AccountFilter

    def get_queryset(self):
        return Account.objects.filter(account_type=self.account_type).select_related('admin_profile')

    def page(self, params) -> Dict[str, Any]:
        queryset = self.filterset_class.apply(params, self.get_queryset())
        return self.paginate(queryset.order_by('-id'), params, AccountSerializer)

    def get_account(self, account_id) -> Account:
        if account_id in (None, ''):
            raise ValidationServiceError("Missing required fields: account_id")
        try:
            account = Account.objects.get(pk=to_int(account_id, 'account_id'))
        except Account.DoesNotExist:
            raise NotFoundServiceError(f"{self.label.capitalize()} not found")
        if account.account_type != self.account_type:
            raise ValidationServiceError(f"Account {account.pk} is not a {self.label} account")
        return account

    def detail(self, account_id) -> Dict[str, Any]:
        return AccountDetailSerializer(self.get_account(account_id)).data

    def _check_unique(self, data: Dict[str, Any], exclude_id=None) -> None:
        others = Account.objects.all()
        if exclude_id is not None:
            others = others.exclude(pk=exclude_id)

        if data.get('username') and others.filter(username=data['username']).exists():
            raise ValidationServiceError("Username already exists")
        if data.get('phone') and others.filter(phone=data['phone']).exists():
            raise ValidationServiceError("Phone number already in use")
        if data.get('email') and others.filter(email=data['email']).exists():
            raise ValidationServiceError("Email already in use")

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['username', 'password'])
        account = self._execute_with_transaction(self._create_account, data)
        self._log_operation(f"add_{self.label}", {'account_id': account.pk, 'username': account.username})
        return {'account_id': account.pk}

    def _create_account(self, data: Dict[str, Any]) -> Account:
        self._check_unique(data)
        account = Account.objects.create_user(
            username=data['username'],
            password=data['password'],
            email=data.get('email') or '',
            account_type=self.account_type,
            status=to_int(data.get('status', Account.Status.NORMAL), 'status'),
            nickname=data.get('nickname') or '',
            phone=data.get('phone') or None,
        )
        self.after_create(account, data)
        return account

    def after_create(self, account: Account, data: Dict[str, Any]) -> None:
        """Hook for type specific rows created alongside the account."""

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['account_id'])
        account = self.get_account(data['account_id'])
        self._execute_with_transaction(self._update_account, account, data)
        self._log_operation(f"update_{self.label}", {'account_id': account.pk})
        return {'account_id': account.pk}

    def _update_account(self, account: Account, data: Dict[str, Any]) -> None:
        self._check_unique(data, exclude_id=account.pk)

        for field in ('username', 'nickname', 'email'):
            if field in data and data[field] is not None:
                setattr(account, field, data[field])
        if 'phone' in data:
            account.phone = data['phone'] or None
        if data.get('status') not in (None, ''):
            account.status = to_int(data['status'], 'status')
        if data.get('password'):
            account.set_password(data['password'])
        account.save()
        self.after_update(account, data)

    def after_update(self, account: Account, data: Dict[str, Any]) -> None:
        """Hook for type specific rows updated alongside the account."""

    def delete(self, account_id) -> Dict[str, Any]:
        account = self.get_account(account_id)
        if self.user is not None and account.pk == self.user.pk:
            raise ValidationServiceError("You cannot delete your own account")
        account.delete()
        self._log_operation(f"delete_{self.label}", {'account_id': account_id})
        return {'account_id': to_int(account_id, 'account_id')}


class AdminService(AccountService):
    """Administrator accounts."""
    account_type = AccountType.ADMIN
    label = 'admin'
    filterset_class = AdminFilter

    def after_create(self, account, data):
        AdminProfile.objects.create(account=account, is_super=to_bool(data.get('is_super', False)))

    def after_update(self, account, data):
        if 'is_super' in data and data['is_super'] not in (None, ''):
            AdminProfile.objects.update_or_create(
                account=account,
                defaults={'is_super': to_bool(data['is_super'])}
            )


class UserService(AccountService):
    """End user accounts, including the registration audit."""
    account_type = AccountType.USER
    label = 'user'

    def page(self, params) -> Dict[str, Any]:
        queryset = self.get_queryset()
        if not param_list(params, 'status'):
            queryset = queryset.exclude(status=Account.Status.PENDING)
        queryset = self.filterset_class.apply(params, queryset)
        return self.paginate(queryset.order_by('-id'), params, AccountSerializer)

    def audit(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Approve or reject a pending registration.

        ``status == 1`` approves the account; any other value rejects it
        and leaves it disabled.
        """
        self._require_params(data, ['account_id', 'status'])
        account = self.get_account(data['account_id'])
        if account.status != Account.Status.PENDING:
            raise ValidationServiceError("Account is not pending review")

        approved = str(data['status']).strip() == str(Account.Status.NORMAL.value)
        account.status = Account.Status.NORMAL if approved else Account.Status.DISABLED
        account.save()

        self._log_operation('audit_user', {'account_id': account.pk, 'approved': approved})
        return {'account_id': account.pk, 'status': account.status}


class RoleService(BaseService):
    """Roles and their assignment to accounts."""
    filterset_class = RoleFilter

    def all(self, params) -> List[Dict[str, Any]]:
        queryset = self.filterset_class.apply(
            {key: params.get(key) for key in ('account_type', 'status')},
            Role.objects.all(),
        )
        return RoleSerializer(queryset.order_by('sort', 'id'), many=True).data

    def page(self, params) -> Dict[str, Any]:
        queryset = self.filterset_class.apply(params, Role.objects.all())
        return self.paginate(queryset.order_by('sort', 'id'), params, RoleSerializer)

    def get_role(self, role_id) -> Role:
        if role_id in (None, ''):
            raise ValidationServiceError("Missing required fields: id")
        return self.get_or_404(Role, message="Role not found", pk=to_int(role_id, 'id'))

    def _check_code(self, account_type, role_code, exclude_id=None) -> None:
        others = Role.objects.filter(account_type=account_type, role_code=role_code)
        if exclude_id is not None:
            others = others.exclude(pk=exclude_id)
        if others.exists():
            raise ValidationServiceError(f"Role code {role_code} already exists")

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['role_name', 'role_code'])
        account_type = data.get('account_type') or AccountType.ADMIN
        if account_type not in AccountType.values:
            raise ValidationServiceError(f"Invalid account_type: {account_type}")
        self._check_code(account_type, data['role_code'])

        role = Role.objects.create(
            role_name=data['role_name'],
            role_code=data['role_code'],
            account_type=account_type,
            description=data.get('description') or '',
            status=to_int(data.get('status', 1), 'status'),
            sort=to_int(data.get('sort') or 0, 'sort'),
        )
        self._log_operation('add_role', {'id': role.pk, 'role_code': role.role_code})
        return RoleSerializer(role).data

    def _clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validated copies of the editable fields present in ``data``."""
        values = {key: data[key] for key in ('role_name', 'role_code', 'description') if key in data}
        for key in ('role_name', 'role_code'):
            if key in values and not str(values[key] or '').strip():
                raise ValidationServiceError(f"{key} cannot be blank")
        if 'account_type' in data:
            if data['account_type'] not in AccountType.values:
                raise ValidationServiceError(f"Invalid account_type: {data['account_type']}")
            values['account_type'] = data['account_type']
        for key in ('status', 'sort'):
            if key in data:
                values[key] = to_int(data[key], key)
        return values

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['id'])
        role = self.get_role(data['id'])
        values = self._clean(data)
        self._check_code(
            values.get('account_type', role.account_type),
            values.get('role_code', role.role_code),
            exclude_id=role.pk,
        )

        changed = self._assign(role, values, ['role_name', 'role_code', 'account_type', 'description', 'status', 'sort'])
        if changed:
            role.save()
        self._log_operation('update_role', {'id': role.pk, 'fields': changed})
        return RoleSerializer(role).data

    def delete(self, role_id) -> Dict[str, Any]:
        role = self.get_role(role_id)
        return self._execute_with_transaction(self._delete_role, role)

    def _delete_role(self, role: Role) -> Dict[str, Any]:
        from admin_core.menus.models import RoleMenu

        menu_links, _ = RoleMenu.objects.filter(role=role).delete()
        account_links, _ = UserRole.objects.filter(role=role).delete()
        role_id = role.pk
        role.delete()

        self._log_operation('delete_role', {
            'id': role_id,
            'role_menus': menu_links,
            'user_roles': account_links,
        })
        return {'id': role_id}

    def assign_roles(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the roles of an account with ``role_ids``."""
        self._require_params(data, ['account_id'])
        account = self.get_or_404(Account, message="Account not found", pk=to_int(data['account_id'], 'account_id'))

        role_ids = data.get('role_ids') or []
        if isinstance(role_ids, str):
            role_ids = [part for part in role_ids.split(',') if part.strip()]
        role_ids = sorted({to_int(role_id, 'role_id') for role_id in role_ids})

        roles = list(Role.objects.filter(pk__in=role_ids, account_type=account.account_type))
        if len(roles) != len(role_ids):
            raise ValidationServiceError("Some roles do not exist or belong to another account type")

        def _replace():
            UserRole.objects.filter(account=account).delete()
            UserRole.objects.bulk_create([UserRole(account=account, role=role) for role in roles])

        self._execute_with_transaction(_replace)
        self._log_operation('assign_roles', {'account_id': account.pk, 'role_ids': role_ids})
        return {'account_id': account.pk, 'role_ids': role_ids}


class DepartmentService(BaseService):
    """Department hierarchy management."""
    filterset_class = DepartmentFilter

    def all(self) -> List[Dict[str, Any]]:
        queryset = Department.objects.filter(status=1).order_by('sort_order', 'id')
        return DepartmentSerializer(queryset, many=True).data

    def tree(self, params) -> List[Dict[str, Any]]:
        queryset = self.filterset_class.apply(params, Department.objects.select_related('manager'))
        rows = list(queryset.order_by('sort_order', 'id'))
        return build_tree(
            rows,
            node=lambda department: dict(DepartmentSerializer(department).data),
            sort_key='sort_order',
        )

    def get_department(self, department_id) -> Department:
        if department_id in (None, ''):
            raise ValidationServiceError("Missing required fields: id")
        return self.get_or_404(Department, message="Department not found", pk=to_int(department_id, 'id'))

    def _ancestor_chain(self, parent_id: int) -> str:
        if not parent_id:
            return ''
        parent = Department.objects.get(pk=parent_id)
        return ','.join(filter(None, [parent.full_parent_id, str(parent.pk)]))

    def _check_parent(self, parent_id: int) -> None:
        if parent_id and not Department.objects.filter(pk=parent_id).exists():
            raise ValidationServiceError("Parent department does not exist")

    def _check_unique(self, name: str, parent_id: int, code: str, exclude_id=None) -> None:
        same_level = Department.objects.filter(parent_id=parent_id, department_name=name)
        same_code = Department.objects.filter(department_code=code) if code else Department.objects.none()
        if exclude_id is not None:
            same_level = same_level.exclude(pk=exclude_id)
            same_code = same_code.exclude(pk=exclude_id)
        if same_level.exists():
            raise ValidationServiceError("Department name already exists at this level")
        if same_code.exists():
            raise ValidationServiceError("Department code already exists")

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['department_name'])
        parent_id = to_int(data.get('parent_id') or 0, 'parent_id')
        code = data.get('department_code') or ''

        self._check_parent(parent_id)
        self._check_unique(data['department_name'], parent_id, code)

        department = Department.objects.create(
            department_code=code,
            department_name=data['department_name'],
            manager_id=data.get('manager_id') or data.get('manager') or None,
            description=data.get('description') or '',
            parent_id=parent_id,
            full_parent_id=self._ancestor_chain(parent_id),
            status=to_int(data.get('status', 1), 'status'),
            sort_order=to_int(data.get('sort_order') or 0, 'sort_order'),
        )
        self._log_operation('add_department', {'id': department.pk})
        return DepartmentSerializer(department).data

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self._require_params(data, ['id', 'department_name'])
        department = self.get_department(data['id'])
        parent_id = department.parent_id
        if 'parent_id' in data:
            parent_id = to_int(data.get('parent_id') or 0, 'parent_id')

        if parent_id:
            if parent_id == department.pk:
                raise ValidationServiceError("A department cannot be its own parent")
            self._check_parent(parent_id)
            descendants = collect_descendant_ids(Department.objects.values('id', 'parent_id'), department.pk)
            if parent_id in descendants:
                raise ValidationServiceError("A department cannot move below one of its descendants")

        code = data.get('department_code', department.department_code) or ''
        self._check_unique(data['department_name'], parent_id, code, exclude_id=department.pk)

        return self._execute_with_transaction(self._update_department, department, data, parent_id, code)

    def _update_department(self, department, data, parent_id, code):
        moved = parent_id != department.parent_id

        self._assign(department, data, ['department_name', 'description'])
        department.department_code = code
        if 'manager_id' in data or 'manager' in data:
            department.manager_id = data.get('manager_id') or data.get('manager') or None
        if data.get('status') not in (None, ''):
            department.status = to_int(data['status'], 'status')
        if data.get('sort_order') not in (None, ''):
            department.sort_order = to_int(data['sort_order'], 'sort_order')
        department.parent_id = parent_id
        department.full_parent_id = self._ancestor_chain(parent_id)
        department.save()

        if moved:
            self._rewrite_descendant_chains(department)
        self._log_operation('update_department', {'id': department.pk, 'moved': moved})
        return DepartmentSerializer(department).data

    def _rewrite_descendant_chains(self, department: Department) -> None:
        rows = list(Department.objects.all())
        by_id = {row.pk: row for row in rows}
        descendant_ids = collect_descendant_ids(rows, department.pk)
        for row_id in descendant_ids:
            row = by_id[row_id]
            chain = []
            parent = by_id.get(row.parent_id)
            while parent is not None:
                chain.append(str(parent.pk))
                parent = by_id.get(parent.parent_id)
            row.full_parent_id = ','.join(reversed(chain))
        Department.objects.bulk_update(
            [by_id[row_id] for row_id in descendant_ids],
            ['full_parent_id']
        )

    def delete(self, department_id) -> Dict[str, Any]:
        department = self.get_department(department_id)
        if Department.objects.filter(parent_id=department.pk).exists():
            raise ValidationServiceError("Department has sub-departments and cannot be deleted")
        department.delete()
        self._log_operation('delete_department', {'id': department.pk})
        return {'id': department.pk}
