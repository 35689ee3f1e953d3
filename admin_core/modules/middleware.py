"""
Request-time module synchronisation.
"""

import logging
import time

from django.conf import settings
from django.core.cache import cache
from django.utils.deprecation import MiddlewareMixin

from .scanner import scan_and_update_modules

logger = logging.getLogger(__name__)

SYNC_CACHE_KEY = 'modules_sync_timestamp'


class ModuleSyncMiddleware(MiddlewareMixin):
    """
    Rescan module manifests at most once per ``MODULE_SYNC_INTERVAL`` seconds.

    The timestamp is stored before scanning so concurrent requests do not
    start a second scan. A failed scan is logged and the request proceeds.
    """

    def __init__(self, get_response=None):
        super().__init__(get_response)
        self.interval = getattr(settings, 'MODULE_SYNC_INTERVAL', 300)

    def process_request(self, request):
        now = int(time.time())
        last_sync = cache.get(SYNC_CACHE_KEY) or 0
        if now - last_sync < self.interval:
            return None

        cache.set(SYNC_CACHE_KEY, now, self.interval * 2)
        try:
            scan_and_update_modules()
        except Exception as e:
            logger.warning(f"Module sync on request failed: {e}", exc_info=True)
        return None
