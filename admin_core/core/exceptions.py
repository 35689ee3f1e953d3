"""
REST exception handling.

Service and module errors become ``{"error": message}`` responses with the
status code the error class declares.
"""

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from .services.base import ServiceError, ValidationServiceError

logger = logging.getLogger(__name__)


def _handled_errors():
    # Imported lazily: the modules app imports core.
    from admin_core.modules.exceptions import ModuleError

    return (ServiceError, ModuleError)


def service_exception_handler(exc, context):
    """DRF exception handler aware of ``ServiceError`` and ``ModuleError``."""
    if not isinstance(exc, _handled_errors()):
        return exception_handler(exc, context)

    if not isinstance(exc, ValidationServiceError):
        view = context.get('view')
        logger.info(f"{exc.__class__.__name__} in {view.__class__.__name__}: {exc}")
    return Response({'error': str(exc)}, status=exc.status_code)
