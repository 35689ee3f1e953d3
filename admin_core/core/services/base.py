"""
Service layer foundation.

Every admin service works on behalf of one account (``self.user``) and
reports failures by raising a ``ServiceError`` subclass. Each error class
carries the HTTP status the REST layer answers with.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Type, TypeVar

from django.core.exceptions import ValidationError, PermissionDenied
from django.db import transaction

from ..pagination import AdminPagination

T = TypeVar('T')


class ServiceError(Exception):
    """A request the service refused to carry out."""
    status_code = 400


class ValidationServiceError(ServiceError):
    """Bad or missing input."""


class PermissionServiceError(ServiceError):
    status_code = 403


class NotFoundServiceError(ServiceError):
    status_code = 404


class BaseService:
    """
    Shared plumbing for admin services.

    ``context`` may hold the current ``request``; services read the client
    address from it.
    """
    pagination_class = AdminPagination

    def __init__(self, user=None, context: Optional[Dict[str, Any]] = None):
        self.user = user
        self.context = context or {}
        self.request = self.context.get('request')
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def _log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None, level: str = 'info'):
        """Write one audit-style line: operation, acting account, details."""
        actor = getattr(self.user, 'username', None) or 'system'
        message = f"{operation} - account={actor}"
        if details:
            message += f" details={details}"
        getattr(self.logger, level, self.logger.info)(message)

    def _require_user(self):
        """Return the acting account or raise when there is none."""
        if not self.user or not getattr(self.user, 'is_authenticated', False):
            raise PermissionServiceError("Authentication required")
        return self.user

    @transaction.atomic
    def _execute_with_transaction(self, operation_func: Callable, *args, **kwargs) -> Any:
        """
        Run ``operation_func`` atomically.

        Django validation and permission errors become service errors;
        anything unexpected is logged and re-raised as ``ServiceError``.
        """
        try:
            return operation_func(*args, **kwargs)
        except ValidationError as e:
            self._handle_validation_error(e)
        except PermissionDenied as e:
            raise PermissionServiceError(str(e))
        except ServiceError:
            raise
        except Exception as e:
            self.logger.error(f"Transaction failed: {e}", exc_info=True)
            raise ServiceError(f"Operation failed: {e}")

    def _handle_validation_error(self, error: ValidationError) -> None:
        if hasattr(error, 'message_dict'):
            detail = error.message_dict
        else:
            detail = '; '.join(error.messages)
        raise ValidationServiceError(f"Validation failed: {detail}")

    def _require_params(self, data: Dict[str, Any], required_fields: Iterable[str]) -> None:
        """
        Raise ``ValidationServiceError`` naming every blank field.

        ``0`` and ``False`` count as present; ``None`` and ``''`` do not.
        """
        missing_fields = [
            field for field in required_fields
            if data.get(field) is None or data.get(field) == ''
        ]
        if missing_fields:
            raise ValidationServiceError(f"Missing required fields: {', '.join(missing_fields)}")

    def get_or_404(self, model_class: Type[T], message: Optional[str] = None, **kwargs) -> T:
        try:
            return model_class.objects.get(**kwargs)
        except model_class.DoesNotExist:
            raise NotFoundServiceError(message or f"{model_class.__name__} not found")
        except model_class.MultipleObjectsReturned:
            raise ValidationServiceError(f"Multiple {model_class.__name__} objects found")

    def _assign(self, instance: Any, data: Dict[str, Any], fields: Iterable[str]) -> list:
        """Copy the listed keys present in ``data`` onto ``instance``; return the changed names."""
        changed = []
        for field in fields:
            if field in data:
                setattr(instance, field, data[field])
                changed.append(field)
        return changed

    def paginate(self, queryset, params, serializer_class=None) -> Dict[str, Any]:
        """One page of ``queryset`` in the ``{list, total, page, page_size}`` envelope."""
        return self.pagination_class().paginate(queryset, params, serializer_class)
