"""
Admin Core Package

Provides the modular administrative backend:
- Accounts, roles and departments
- Menus and the navigation tree
- Module marketplace (install, uninstall, pull from git or zip)
- Announcements, system notifications and messages
"""

__version__ = '0.1.0'

# This will make sure the app is always imported when
# Django starts so that shared_task will use this app.
from .celery import app as celery_app

__all__ = ['celery_app']
