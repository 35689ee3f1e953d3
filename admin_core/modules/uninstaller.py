"""
Module Uninstaller

Removes a module's account links, menus and code, and marks it uninstalled.
"""

import logging
import os
import re
import shutil
from pathlib import Path
from typing import Any, Dict

from django.db import transaction

from .exceptions import ModuleNotFoundError, ModuleStateError, ModuleUninstallError
from .git import find_git, repository_root, run_git
from .manifest import module_dir, modules_root
from .models import AccountModule, Module
from .signals import module_uninstalled

logger = logging.getLogger(__name__)

SECTION_HEADER = re.compile(r'^\s*\[submodule\s+"(?P<name>[^"]+)"\]\s*$')
PATH_LINE = re.compile(r'^\s*path\s*=\s*(?P<path>.+?)\s*$')


def remove_gitmodules_entry(gitmodules: Path, name: str, relative_path: str) -> bool:
    """
    Drop the ``[submodule]`` section registered for ``name`` or ``relative_path``.

    Returns True when the file changed.
    """
    if not gitmodules.is_file():
        return False

    sections = []
    for line in gitmodules.read_text(encoding='utf-8').splitlines():
        if SECTION_HEADER.match(line) or not sections:
            sections.append([line])
        else:
            sections[-1].append(line)

    def _belongs(section):
        header = SECTION_HEADER.match(section[0])
        if not header:
            return False
        if header.group('name') in (name, relative_path):
            return True
        for line in section[1:]:
            match = PATH_LINE.match(line)
            if match and match.group('path') == relative_path:
                return True
        return False

    kept = [section for section in sections if not _belongs(section)]
    if len(kept) == len(sections):
        return False

    content = '\n'.join('\n'.join(section) for section in kept)
    content = re.sub(r'\n{3,}', '\n\n', content).strip()
    gitmodules.write_text(content + '\n' if content else '', encoding='utf-8')
    return True


class ModuleUninstaller:
    """
    Uninstall a module for every account.
    """

    def uninstall(self, module_id) -> Dict[str, Any]:
        try:
            module = Module.objects.get(pk=module_id)
        except (Module.DoesNotExist, ValueError):
            raise ModuleNotFoundError(f"Module {module_id} does not exist")

        if module.is_core:
            raise ModuleStateError(f"Core module {module.name} cannot be uninstalled")

        path = module_dir(module.name)
        with transaction.atomic():
            account_links = self.remove_account_modules(module)
            menu_count = self.remove_menus(module)
            self.remove_directory(path, module)

            module.is_installed = False
            module.installed_at = None
            module.save(update_fields=['is_installed', 'installed_at', 'updated_at'])

        logger.info(
            f"Uninstalled module {module.name} from {path} "
            f"(account links: {account_links}, menus: {menu_count})"
        )
        module_uninstalled.send(sender=Module, module=module, path=str(path))

        return {
            'module_id': module.pk,
            'module_name': module.name,
            'module_path': str(path),
        }

    def remove_account_modules(self, module: Module) -> int:
        deleted, _ = AccountModule.objects.filter(module=module).delete()
        return deleted

    def remove_menus(self, module: Module) -> int:
        from admin_core.menus.models import Menu, ModuleMenu

        ModuleMenu.objects.filter(module=module).delete()
        return Menu.objects.filter(module=module).soft_delete()

    def remove_directory(self, path: Path, module: Module) -> None:
        if not path.exists():
            logger.info(f"Module directory {path} does not exist, skipping removal")
            return

        real_path = os.path.realpath(path)
        real_root = os.path.realpath(modules_root())
        if os.path.commonpath([real_path, real_root]) != real_root or real_path == real_root:
            raise ModuleUninstallError(f"Refusing to delete {path}: it is not inside {real_root}")

        if module.pull_type == Module.PullType.GIT:
            self.remove_git_submodule(path, module.name)
            return

        try:
            shutil.rmtree(path)
        except OSError as e:
            raise ModuleUninstallError(f"Failed to delete module directory {path}: {e}")

    def remove_git_submodule(self, path: Path, name: str) -> None:
        git = find_git()
        root = repository_root()
        relative_path = os.path.relpath(path, root).replace(os.sep, '/')

        # deinit may fail when the work tree is already gone
        run_git(git, ['submodule', 'deinit', '-f', '--', relative_path])

        completed = run_git(git, ['submodule', 'rm', '-f', '--', relative_path])
        if completed.returncode != 0:
            logger.info(f"git submodule rm failed for {relative_path}, cleaning .gitmodules manually")
            remove_gitmodules_entry(root / '.gitmodules', name, relative_path)
            run_git(git, ['rm', '--cached', '-r', '--', relative_path])

        if path.exists():
            try:
                shutil.rmtree(path)
            except OSError as e:
                logger.warning(f"Failed to delete submodule directory {path}: {e}")

        for cache in {root / '.git' / 'modules' / name, root / '.git' / 'modules' / relative_path.replace('/', '_')}:
            if cache.exists():
                try:
                    shutil.rmtree(cache)
                except OSError as e:
                    logger.warning(f"Failed to delete submodule cache {cache}: {e}")
