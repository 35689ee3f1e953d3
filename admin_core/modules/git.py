"""
Thin wrapper around the ``git`` executable used for submodule modules.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from django.conf import settings

from .exceptions import GitNotFoundError
from .manifest import modules_root

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATES = ['git', '/usr/bin/git', '/usr/local/bin/git']


def repository_root() -> Path:
    """Work tree the module submodules are registered in (the parent of ``Modules/``)."""
    return modules_root().parent


def find_git() -> str:
    """
    Return the first git candidate that answers ``--version``.

    Raises:
        GitNotFoundError: if none does
    """
    for candidate in getattr(settings, 'MODULE_GIT_CANDIDATES', DEFAULT_CANDIDATES):
        try:
            completed = subprocess.run(
                [candidate, '--version'],
                capture_output=True,
                text=True,
                check=False,
                timeout=10,
            )
        except (OSError, subprocess.SubprocessError):
            continue
        if completed.returncode == 0:
            return candidate
    raise GitNotFoundError("git command not found, make sure git is installed")


def run_git(git: str, args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """Run one git command and return the completed process, stderr folded into stdout."""
    command = [git] + list(args)
    logger.debug(f"Running {' '.join(command)} in {cwd or repository_root()}")
    return subprocess.run(
        command,
        cwd=str(cwd or repository_root()),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=False,
    )
