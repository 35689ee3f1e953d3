"""
Celery application for admin-core.

Workers and beat read every ``CELERY_*`` setting, including the beat
schedule that runs the module manifest sync.
"""
import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'admin_core.settings')

app = Celery('admin_core')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
