"""
Menu import from module CSV files.

Each module may ship ``data/menu.csv`` with a header row and the columns
``menu_name, menu_key, menu_path, menu_icon, menu_type, parent_key,
component, redirect, is_required, sort, status``. Parents are referenced
by ``menu_key`` and rows may appear in any order.
"""

import csv
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from django.db import transaction

from admin_core.accounts.models import AccountType
from admin_core.modules.exceptions import ModuleValidationError
from admin_core.modules.manifest import ModuleManifest, module_dir, modules_root
from admin_core.modules.models import Module

from .models import Menu, ModuleMenu

logger = logging.getLogger(__name__)

MENU_CSV = Path('data') / 'menu.csv'


def read_menu_csv(csv_path: Path) -> List[Dict[str, str]]:
    """
    Read CSV rows as dicts keyed by the trimmed header.

    Rows whose cell count differs from the header and blank rows are skipped.
    """
    with open(csv_path, newline='', encoding='utf-8-sig') as handle:
        reader = csv.reader(handle)
        headers = next(reader, None)
        if not headers:
            return []
        headers = [header.strip() for header in headers]

        rows = []
        for row in reader:
            if len(row) != len(headers):
                continue
            cells = [cell.strip() for cell in row]
            if not any(cells):
                continue
            rows.append(dict(zip(headers, cells)))
        return rows


def _int_cell(value: Optional[str], default: int = 0) -> int:
    try:
        return int(value) if value not in (None, '') else default
    except ValueError:
        return default


class MenuImportService:
    """
    Import module menus, resolving ``parent_key`` references level by level.
    """

    def __init__(self, account_type: Optional[str] = None):
        self.account_type = account_type or AccountType.ADMIN
        self.warnings: List[str] = []

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def get_or_create_module(self, module_name: str) -> Module:
        """Existing module by name, else one described by ``Modules/<name>/module.json``."""
        module = Module.objects.filter(name=module_name).first()
        if module is not None:
            return module

        defaults = {
            'alias': module_name.lower(),
            'title': module_name,
            'description': '',
            'status': 1,
            'priority': 0,
        }
        try:
            manifest = ModuleManifest.load(module_dir(module_name))
        except ModuleValidationError as e:
            logger.info(f"No usable manifest for {module_name}, using defaults: {e}")
        else:
            defaults.update({
                'alias': manifest.alias or module_name.lower(),
                'title': manifest.display_title,
                'description': manifest.description,
                'priority': manifest.priority,
                'icon': manifest.icon,
            })

        module, created = Module.objects.get_or_create(name=module_name, defaults=defaults)
        if created:
            logger.info(f"Created module {module_name} (id {module.pk}) for menu import")
        return module

    def _upsert(self, row: Dict[str, str], parent_id: int, module: Module) -> Menu:
        menu = Menu.all_objects.filter(account_type=self.account_type, menu_key=row['menu_key']).first()
        if menu is None:
            menu = Menu(account_type=self.account_type, menu_key=row['menu_key'])

        menu.menu_name = row.get('menu_name') or row['menu_key']
        menu.menu_path = row.get('menu_path') or ''
        menu.menu_icon = row.get('menu_icon') or ''
        menu.menu_type = row.get('menu_type') or Menu.MenuType.MENU
        menu.parent_id = parent_id
        menu.module = module
        menu.component = row.get('component') or None
        menu.redirect = row.get('redirect') or None
        menu.is_required = bool(_int_cell(row.get('is_required')))
        menu.sort = _int_cell(row.get('sort'))
        menu.status = _int_cell(row.get('status'), 1)
        menu.is_system = True
        menu.deleted_at = None
        menu.save()
        return menu

    def import_rows(self, rows: List[Dict[str, str]], module: Module) -> int:
        """Insert top-level rows first, then every row whose parent is already known."""
        menu_ids: Dict[str, int] = {}
        count = 0

        remaining = [row for row in rows if row.get('menu_key')]
        for row in remaining:
            if not row.get('parent_key'):
                menu_ids[row['menu_key']] = self._upsert(row, 0, module).pk
                count += 1
        remaining = [row for row in remaining if row.get('parent_key')]

        while remaining:
            resolved = []
            for row in remaining:
                parent_id = menu_ids.get(row['parent_key'])
                if parent_id is None:
                    continue
                menu_ids[row['menu_key']] = self._upsert(row, parent_id, module).pk
                resolved.append(row)
                count += 1

            if not resolved:
                keys = ', '.join(row['menu_key'] for row in remaining)
                self._warn(f"Some menus could not be processed. Check parent_key references: {keys}")
                break
            remaining = [row for row in remaining if row not in resolved]

        return count

    def link_module_menus(self, module: Module) -> None:
        menu_ids = Menu.objects.filter(account_type=self.account_type, module=module).values_list('id', flat=True)
        for menu_id in menu_ids:
            ModuleMenu.objects.get_or_create(module=module, menu_id=menu_id)

    def import_menus_from_csv(self, module_name: str, csv_path) -> Dict[str, Any]:
        csv_path = Path(csv_path)
        if not csv_path.is_file():
            message = f"CSV file not found: {csv_path}"
            self._warn(message)
            return {'success': False, 'message': message, 'count': 0}

        rows = read_menu_csv(csv_path)
        with transaction.atomic():
            module = self.get_or_create_module(module_name)
            if not rows:
                message = 'No menu data found in CSV file.'
                self._warn(message)
                return {'success': True, 'message': message, 'count': 0}

            count = self.import_rows(rows, module)
            self.link_module_menus(module)

        message = f"Successfully imported {count} menus from {module_name}"
        logger.info(message)
        return {'success': True, 'message': message, 'count': count}

    def import_all_modules_menus(self) -> Dict[str, Any]:
        root = modules_root()
        if not root.is_dir():
            message = f"Modules directory not found: {root}"
            logger.error(message)
            return {'success': False, 'message': message, 'modules': []}

        results = []
        for directory in sorted(p for p in root.iterdir() if p.is_dir()):
            csv_path = directory / MENU_CSV
            if not csv_path.is_file():
                continue

            try:
                module_name = ModuleManifest.load(directory).name
            except ModuleValidationError:
                module_name = directory.name

            try:
                result = self.import_menus_from_csv(module_name, csv_path)
            except Exception as e:
                logger.error(f"Failed to import menus for module {module_name}: {e}", exc_info=True)
                result = {'success': False, 'message': str(e), 'count': 0}
            results.append(dict(result, module=module_name, csv_path=str(csv_path)))

        return {'success': True, 'message': 'All modules menus imported', 'modules': results}
