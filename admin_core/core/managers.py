"""
Soft delete querysets.

Menus, departments and notices are never removed from their tables; a
``deleted_at`` timestamp hides them instead.
"""

from django.db import models
from django.utils import timezone


class SoftDeleteQuerySet(models.QuerySet):

    def alive(self):
        return self.filter(deleted_at__isnull=True)

    def soft_delete(self):
        """Stamp every row in the queryset; returns the row count."""
        return self.update(deleted_at=timezone.now())


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """Default manager: rows with ``deleted_at`` set are invisible."""

    def get_queryset(self):
        return super().get_queryset().alive()
