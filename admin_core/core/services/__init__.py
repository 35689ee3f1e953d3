from .base import (
    BaseService,
    ServiceError,
    ValidationServiceError,
    PermissionServiceError,
    NotFoundServiceError,
)

__all__ = [
    'BaseService',
    'ServiceError',
    'ValidationServiceError',
    'PermissionServiceError',
    'NotFoundServiceError',
]
