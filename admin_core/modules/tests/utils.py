"""Shared helpers for module system tests."""

import io
import json
import subprocess
import tempfile
import zipfile
from pathlib import Path
from unittest.mock import MagicMock

from django.test import override_settings


class ModulesDirMixin:
    """Points MODULES_PATH and MODULES_TEMP_PATH at temporary directories."""

    def setUp(self):
        super().setUp()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.base = Path(tmp.name)
        self.root = self.base / 'Modules'
        self.temp = self.base / 'temp'
        self.root.mkdir()
        settings_override = override_settings(MODULES_PATH=self.root, MODULES_TEMP_PATH=self.temp)
        settings_override.enable()
        self.addCleanup(settings_override.disable)

    def write_manifest(self, directory, **manifest):
        path = self.root / directory
        path.mkdir(parents=True, exist_ok=True)
        (path / 'module.json').write_text(json.dumps(manifest), encoding='utf-8')
        return path


def zip_bytes(files):
    """Build a zip archive in memory from ``{name: content}``."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def fake_response(body=b'', status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.iter_content.return_value = [body]
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def completed(returncode=0, stdout=''):
    return subprocess.CompletedProcess(args=['git'], returncode=returncode, stdout=stdout)
