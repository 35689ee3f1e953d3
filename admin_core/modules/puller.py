"""
Module Puller

Fetches module code into ``Modules/<name>`` either as a git submodule or
from a zip archive.
"""

import logging
import shutil
import time
import zipfile
from pathlib import Path

import requests
from django.conf import settings

from .exceptions import ModulePullError, ModuleValidationError
from .git import find_git, run_git
from .manifest import MANIFEST_FILE, module_dir
from .models import Module

logger = logging.getLogger(__name__)


class ModulePuller:
    """
    Pull the code of a ``Module`` according to its ``pull_type``.
    """

    def __init__(self, timeout=None, temp_path=None):
        self.timeout = timeout or getattr(settings, 'MODULE_DOWNLOAD_TIMEOUT', 300)
        self.temp_path = Path(temp_path or settings.MODULES_TEMP_PATH)
        self.branches = list(getattr(settings, 'MODULE_GIT_BRANCHES', ['main', 'master']))

    def pull(self, module: Module) -> Path:
        """
        Fetch the module code and return the module directory.

        Raises:
            ModuleValidationError: missing or unsupported pull settings
            ModulePullError: the fetch itself failed
        """
        if not module.pull_type or not module.pull_url:
            raise ModuleValidationError("Module pull type and pull URL are required")

        path = module_dir(module.name)
        if module.pull_type == Module.PullType.GIT:
            self.pull_git(path, module.pull_url, module.name)
        elif module.pull_type == Module.PullType.URL:
            self.pull_zip(path, module.pull_url, module.name)
        else:
            raise ModuleValidationError(f"Unsupported module pull type: {module.pull_type}")

        logger.info(f"Pulled module {module.name} into {path} ({module.pull_type})")
        return path

    # Git submodules

    def pull_git(self, path: Path, url: str, name: str) -> None:
        if path.is_dir():
            complete = (path / '.git').exists() and (path / MANIFEST_FILE).is_file()
            if complete:
                self.update_git(path)
                return
            try:
                shutil.rmtree(path)
            except OSError as e:
                raise ModulePullError(f"Failed to clean module directory {path}: {e}")

        git = find_git()
        completed = run_git(git, ['submodule', 'add', '--name', name, '--', url, str(path)])
        if completed.returncode != 0:
            raise ModulePullError(f"git submodule add failed: {completed.stdout.strip()}")

        completed = run_git(git, ['submodule', 'update', '--init', '--recursive', '--', str(path)])
        if completed.returncode != 0:
            raise ModulePullError(f"git submodule init failed: {completed.stdout.strip()}")

        self.verify(path)

    def update_git(self, path: Path) -> None:
        """Pull the configured branches in turn; failure is only logged."""
        git = find_git()
        output = []
        for branch in self.branches:
            completed = run_git(git, ['pull', 'origin', branch], cwd=path)
            if completed.returncode == 0:
                logger.info(f"Updated git module at {path} from origin/{branch}")
                return
            output.append(completed.stdout.strip())

        logger.warning(f"Git module update failed for {path}: {' | '.join(output)}")

    # Zip archives

    def pull_zip(self, path: Path, url: str, name: str) -> None:
        self.temp_path.mkdir(parents=True, exist_ok=True)
        temp_zip = self.temp_path / f"{name}_{int(time.time())}.zip"
        extract_path = self.temp_path / f"{name}_extract"

        try:
            if path.is_dir():
                shutil.rmtree(path)

            self.download(url, temp_zip)

            if extract_path.is_dir():
                shutil.rmtree(extract_path)
            extract_path.mkdir(parents=True)
            try:
                with zipfile.ZipFile(temp_zip) as archive:
                    archive.extractall(extract_path)
            except zipfile.BadZipFile as e:
                raise ModulePullError(f"Cannot open zip file: {e}")

            path.mkdir(parents=True, exist_ok=True)
            self.copy_extracted(extract_path, path)
            self.verify(path)
        finally:
            if temp_zip.exists():
                temp_zip.unlink()
            if extract_path.is_dir():
                shutil.rmtree(extract_path, ignore_errors=True)

    def download(self, url: str, target: Path) -> None:
        try:
            response = requests.get(url, timeout=self.timeout, allow_redirects=True, stream=True)
        except requests.RequestException as e:
            raise ModulePullError(f"Failed to download zip file: {e}")

        with response:
            if response.status_code != 200:
                raise ModulePullError(f"Failed to download zip file: HTTP {response.status_code}")
            with open(target, 'wb') as handle:
                for chunk in response.iter_content(chunk_size=64 * 1024):
                    if chunk:
                        handle.write(chunk)

    def copy_extracted(self, extract_path: Path, path: Path) -> None:
        """
        Copy an extracted archive into the module directory.

        An archive with exactly one top-level directory is unwrapped; files
        next to that directory are not copied.
        """
        entries = list(extract_path.iterdir())
        directories = [entry for entry in entries if entry.is_dir()]

        if len(directories) == 1:
            stray = [entry.name for entry in entries if not entry.is_dir()]
            if stray:
                logger.warning(f"Ignoring files outside the top-level directory: {', '.join(sorted(stray))}")
            shutil.copytree(directories[0], path, dirs_exist_ok=True)
            return

        for source in extract_path.rglob('*'):
            if not source.is_file():
                continue
            target = path / source.relative_to(extract_path)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)

    def verify(self, path: Path) -> None:
        if not path.is_dir():
            raise ModulePullError(f"Module directory {path} was not created")
        if not (path / MANIFEST_FILE).is_file():
            raise ModulePullError(f"{MANIFEST_FILE} not found in {path}, the module may be incomplete")
