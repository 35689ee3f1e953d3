"""
Abstract models shared by the admin apps.
"""

from django.db import models
from django.utils import timezone

from .managers import SoftDeleteManager, SoftDeleteQuerySet


class TimestampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class SoftDeleteModel(models.Model):
    """
    Rows are hidden, not removed.

    ``objects`` skips deleted rows; ``all_objects`` sees every row, which
    the CSV importer and menu creation need to revive a deleted key.
    """
    deleted_at = models.DateTimeField(null=True, blank=True, db_index=True)

    objects = SoftDeleteManager()
    all_objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    def delete(self, using=None, keep_parents=False):
        self.deleted_at = timezone.now()
        self.save(using=using, update_fields=['deleted_at'])
