"""
Module System Tasks
"""

import logging

from celery import shared_task

from .scanner import scan_and_update_modules

logger = logging.getLogger(__name__)


@shared_task
def sync_modules(path=None):
    """Periodic task syncing ``module.json`` manifests into the module table."""
    result = scan_and_update_modules(path)
    if result['failed']:
        logger.warning(f"Module sync reported {len(result['failed'])} failures: {result['failed']}")
    return {
        'success': len(result['success']),
        'failed': len(result['failed']),
    }
