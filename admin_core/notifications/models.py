"""
Announcements, system notifications and internal messages.

All three are soft deleted. ``NotificationRead`` records which account has
seen which item.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone

from admin_core.core.models import SoftDeleteModel, TimestampedModel


class Announcement(TimestampedModel, SoftDeleteModel):
    """
    Banner style announcement shown on a platform for a period of time.
    """

    class Status(models.IntegerChoices):
        DISABLED = 0, 'Disabled'
        NORMAL = 1, 'Normal'

    title = models.CharField(max_length=255)
    content = models.TextField()
    target_platform = models.CharField(max_length=100, default='all')
    position = models.CharField(max_length=50, default='home')
    start_time = models.DateTimeField(null=True, blank=True)
    end_time = models.DateTimeField(null=True, blank=True)
    status = models.SmallIntegerField(choices=Status.choices, default=Status.NORMAL, db_index=True)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='announcements'
    )

    class Meta:
        db_table = 'gpa_announcements'
        ordering = ['-id']

    def __str__(self):
        return self.title


class SystemNotification(TimestampedModel, SoftDeleteModel):
    """
    Notification broadcast to every account of a platform.
    """

    class Status(models.IntegerChoices):
        DISABLED = 0, 'Disabled'
        NORMAL = 1, 'Normal'

    title = models.CharField(max_length=255)
    content = models.TextField()
    target_platform = models.CharField(max_length=100, default='all')
    type = models.CharField(max_length=50, default='system', db_index=True)
    status = models.SmallIntegerField(choices=Status.choices, default=Status.NORMAL, db_index=True)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='system_notifications'
    )

    class Meta:
        db_table = 'gpa_system_notifications'
        ordering = ['-id']

    def __str__(self):
        return self.title


class Message(TimestampedModel, SoftDeleteModel):
    """
    Internal message from one account to another.
    """

    class Status(models.IntegerChoices):
        UNREAD = 0, 'Unread'
        READ = 1, 'Read'

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sent_messages'
    )
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='received_messages'
    )
    title = models.CharField(max_length=255)
    content = models.TextField()
    target_platform = models.CharField(max_length=100, default='all')
    status = models.SmallIntegerField(choices=Status.choices, default=Status.UNREAD, db_index=True)
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_messages'
    )

    class Meta:
        db_table = 'gpa_messages'
        ordering = ['-id']

    def __str__(self):
        return self.title


class NotificationRead(models.Model):
    """
    One account having read one announcement, notification or message.
    """

    class ReadType(models.TextChoices):
        ANNOUNCEMENT = 'announcement', 'Announcement'
        SYSTEM_NOTIFICATION = 'system_notification', 'System notification'
        MESSAGE = 'message', 'Message'

    read_type = models.CharField(max_length=30, choices=ReadType.choices)
    target_id = models.BigIntegerField()
    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notification_reads'
    )
    read_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'gpa_notification_reads'
        ordering = ['-read_at', '-id']
        unique_together = ['read_type', 'target_id', 'account']
        indexes = [
            models.Index(fields=['read_type', 'target_id'], name='gpa_notif_read_target_idx'),
        ]
