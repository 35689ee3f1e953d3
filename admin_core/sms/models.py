"""
SMS send log.
"""

from django.conf import settings
from django.db import models

from admin_core.core.models import TimestampedModel


class SmsType(models.TextChoices):
    LOGIN = 'login', 'Login'
    REGISTER = 'register', 'Register'
    RESET_PASSWORD = 'reset_password', 'Reset password'
    BIND_PHONE = 'bind_phone', 'Bind phone'
    NOTICE = 'notice', 'Notice'


class SourceType(models.TextChoices):
    """Client the request came from."""
    ADMIN = 'admin', 'Admin'
    PC = 'pc', 'PC'
    H5 = 'h5', 'H5'
    APP = 'app', 'App'
    MINI_PROGRAM = 'mini_program', 'Mini program'


class SmsLog(TimestampedModel):
    """
    One SMS send attempt.
    """

    class Status(models.IntegerChoices):
        FAILURE = 0, 'Failure'
        SUCCESS = 1, 'Success'

    account = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sms_logs'
    )
    source_type = models.CharField(max_length=20, choices=SourceType.choices, default=SourceType.ADMIN)
    sms_type = models.CharField(max_length=30, choices=SmsType.choices, db_index=True)
    phone = models.CharField(max_length=32, db_index=True)
    content = models.TextField(blank=True, default='')
    status = models.SmallIntegerField(choices=Status.choices, default=Status.SUCCESS, db_index=True)
    error_message = models.TextField(blank=True, default='')
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    ip_location = models.CharField(max_length=255, blank=True, default='')
    expire_minutes = models.PositiveIntegerField(default=0)
    extend_data = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'sms_logs'
        ordering = ['-id']

    def __str__(self):
        return f"{self.sms_type} to {self.phone}"
