"""
Test settings for admin-core.

Starts from ``admin_core.settings`` and swaps out everything that would
touch the outside world.
"""

import tempfile
from pathlib import Path

from admin_core.settings import *  # noqa: F401,F403
from admin_core.settings import LOGGING, MIDDLEWARE, SIMPLE_JWT

SECRET_KEY = 'test-secret-key-for-admin-core-tests'
DEBUG = True
ALLOWED_HOSTS = ['*']

# ModuleSyncMiddleware is driven directly by its own tests
MIDDLEWARE = [name for name in MIDDLEWARE if not name.endswith('ModuleSyncMiddleware')]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

AUTH_PASSWORD_VALIDATORS = []
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

SIMPLE_JWT = dict(SIMPLE_JWT, SIGNING_KEY=SECRET_KEY)

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'admin-core-tests',
    }
}

# Celery runs tasks inline
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

# Module tests override MODULES_PATH with their own temporary tree
MODULES_PATH = Path(tempfile.gettempdir()) / 'admin_core_test_modules'
MODULES_TEMP_PATH = Path(tempfile.gettempdir()) / 'admin_core_test_temp'
MODULE_DOWNLOAD_TIMEOUT = 5
MODULE_GIT_BRANCHES = ['main', 'master']

LOGGING = dict(LOGGING, loggers={
    'admin_core': {
        'handlers': ['console'],
        'level': 'WARNING',
        'propagate': False,
    },
})
