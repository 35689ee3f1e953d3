"""
WSGI entry point for admin-core.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'admin_core.settings')

application = get_wsgi_application()
