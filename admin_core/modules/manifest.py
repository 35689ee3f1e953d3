"""
Module Manifest

Parsing of the ``module.json`` file every module directory carries.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from django.conf import settings

from .exceptions import ModuleValidationError

MANIFEST_FILE = 'module.json'


def modules_root() -> Path:
    """Directory holding one sub-directory per module."""
    return Path(settings.MODULES_PATH)


def module_dir(name: str) -> Path:
    return modules_root() / name


def _as_list(value: Any) -> List[Any]:
    if value is None or value == '':
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, dict):
        return list(value.keys())
    return [part.strip() for part in str(value).split(',') if part.strip()]


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class ModuleManifest:
    """Contents of one ``module.json``."""
    name: str
    path: Path
    alias: str = ''
    title: str = ''
    description: str = ''
    icon: str = ''
    version: str = ''
    priority: int = 0
    source: str = ''
    status: int = 1
    is_core: bool = False
    author: str = ''
    author_email: str = ''
    homepage: str = ''
    keywords: List[str] = field(default_factory=list)
    providers: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Path) -> 'ModuleManifest':
        if not isinstance(data, dict):
            raise ModuleValidationError(f"{path / MANIFEST_FILE}: manifest must be a JSON object")

        name = str(data.get('name') or '').strip()
        if not name:
            raise ModuleValidationError(f"{path / MANIFEST_FILE}: missing 'name'")

        meta = (data.get('extra') or {}).get('meta') or {}

        author = data.get('author') or ''
        author_email = data.get('author_email') or ''
        authors = data.get('authors')
        if not author and isinstance(authors, list) and authors and isinstance(authors[0], dict):
            author = authors[0].get('name') or ''
            author_email = author_email or authors[0].get('email') or ''

        return cls(
            name=name,
            path=path,
            alias=str(data.get('alias') or ''),
            title=str(data.get('title') or meta.get('module_title') or ''),
            description=str(data.get('description') or ''),
            icon=str(meta.get('module_icon') or data.get('icon') or ''),
            version=str(data.get('version') or ''),
            priority=_as_int(data.get('priority')),
            source=str(data.get('source') or meta.get('module_source') or ''),
            status=_as_int(data.get('status', 1), 1),
            is_core=bool(_as_int(meta.get('module_is_core', data.get('is_core', 0)))),
            author=str(author),
            author_email=str(author_email),
            homepage=str(data.get('homepage') or ''),
            keywords=[str(k) for k in _as_list(data.get('keywords'))],
            providers=[str(p) for p in _as_list(data.get('providers'))],
            dependencies=[str(d) for d in _as_list(data.get('dependencies') or data.get('requires'))],
            raw=data,
        )

    @classmethod
    def load(cls, path: Path) -> 'ModuleManifest':
        """
        Read ``<path>/module.json``.

        Raises:
            ModuleValidationError: missing file, invalid JSON or no ``name``
        """
        manifest_file = Path(path) / MANIFEST_FILE
        if not manifest_file.is_file():
            raise ModuleValidationError(f"{manifest_file} does not exist")
        try:
            data = json.loads(manifest_file.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError) as e:
            raise ModuleValidationError(f"{manifest_file}: cannot read manifest: {e}")
        except json.JSONDecodeError as e:
            raise ModuleValidationError(f"{manifest_file}: invalid JSON: {e}")
        return cls.from_dict(data, Path(path))

    @property
    def display_title(self) -> str:
        return self.title or self.alias or self.name

    def model_defaults(self) -> Dict[str, Any]:
        """Field values for the ``Module`` row mirroring this manifest."""
        return {
            'alias': self.alias,
            'title': self.display_title,
            'description': self.description,
            'icon': self.icon,
            'version': self.version,
            'priority': self.priority,
            'source': self.source,
            'is_core': self.is_core,
            'author': self.author,
            'author_email': self.author_email,
            'homepage': self.homepage,
            'keywords': self.keywords,
            'providers': self.providers,
            'dependencies': self.dependencies,
        }

    def matches(self, keyword: Optional[str]) -> bool:
        """Case-insensitive match on alias, title, name, description or any keyword."""
        if not keyword:
            return True
        needle = keyword.strip().lower()
        haystack = [self.alias, self.title, self.name, self.description] + list(self.keywords)
        return any(needle in str(value).lower() for value in haystack if value)
