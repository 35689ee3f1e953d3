"""
Errors raised while syncing, pulling or removing module code.
"""


class ModuleError(Exception):
    status_code = 400


class ModuleNotFoundError(ModuleError):
    """No module row with the requested id"""
    status_code = 404


class ModuleValidationError(ModuleError):
    """Unreadable ``module.json`` or an incomplete pull request"""


class ModuleStateError(ModuleError):
    """Already installed for the account, or a core module"""


class ModulePullError(ModuleError):
    """git or download step failed"""


class ModuleUninstallError(ModuleError):
    """Code directory could not be removed"""


class GitNotFoundError(ModulePullError):
    """None of MODULE_GIT_CANDIDATES answers `--version`"""
