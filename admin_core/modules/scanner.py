"""
Module Scanner

Keeps the module table in step with the ``module.json`` manifests on disk.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from django.db import transaction
from django.utils import timezone

from .exceptions import ModuleValidationError
from .manifest import ModuleManifest, modules_root
from .models import Module
from .signals import module_synced

logger = logging.getLogger(__name__)


def _module_dirs(root: Path) -> List[Path]:
    return sorted(
        child for child in root.iterdir()
        if child.is_dir() and not child.name.startswith('.')
    )


def resolve_module_path(path) -> Path:
    """Absolute paths are used as given; relative ones are taken under ``Modules/``."""
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = modules_root() / candidate
    return candidate


@transaction.atomic
def upsert_module(manifest: ModuleManifest) -> Module:
    """Create or refresh the ``Module`` row for ``manifest`` and mark it installed."""
    module, created = Module.objects.get_or_create(
        name=manifest.name,
        defaults=dict(manifest.model_defaults(), status=manifest.status),
    )
    if not created:
        for field, value in manifest.model_defaults().items():
            setattr(module, field, value)

    module.is_installed = True
    if module.installed_at is None:
        module.installed_at = timezone.now()
    module.save()
    return module


def scan_and_update_modules(path: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Read manifests and upsert them into the module table.

    Args:
        path: One module directory, absolute or relative to ``Modules/``.
            All module directories are scanned when omitted.

    Returns:
        ``{"success": [{module_name, path}], "failed": [{path, message}]}``
    """
    result = {'success': [], 'failed': []}

    if path:
        directories = [resolve_module_path(path)]
    else:
        root = modules_root()
        if not root.is_dir():
            logger.warning(f"Modules directory {root} does not exist, nothing to sync")
            return result
        directories = _module_dirs(root)

    for directory in directories:
        try:
            if not directory.is_dir():
                raise ModuleValidationError(f"{directory} is not a directory")
            manifest = ModuleManifest.load(directory)
            upsert_module(manifest)
        except ModuleValidationError as e:
            logger.warning(f"Skipping module at {directory}: {e}")
            result['failed'].append({'path': str(directory), 'message': str(e)})
            continue

        result['success'].append({'module_name': manifest.name, 'path': str(directory)})

    logger.info(
        f"Module sync finished: {len(result['success'])} synced, {len(result['failed'])} failed"
    )
    module_synced.send(sender=Module, result=result)
    return result


def my_apps(keyword: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    List the modules present on disk.

    Unreadable manifests are skipped. Sorted by priority, highest first.
    """
    root = modules_root()
    if not root.is_dir():
        return []

    manifests = []
    for directory in _module_dirs(root):
        try:
            manifest = ModuleManifest.load(directory)
        except ModuleValidationError as e:
            logger.debug(f"Ignoring {directory}: {e}")
            continue
        if manifest.matches(keyword):
            manifests.append(manifest)

    manifests.sort(key=lambda m: (-m.priority, m.name))
    return [
        {
            'name': m.name,
            'alias': m.alias,
            'title': m.display_title,
            'description': m.description,
            'keywords': m.keywords,
            'priority': m.priority,
            'source': m.source,
            'status': m.status,
            'icon': m.icon,
            'version': m.version,
            'path': str(m.path),
        }
        for m in manifests
    ]
