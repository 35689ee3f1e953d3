"""
Account, role and department models.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models

from admin_core.core.models import TimestampedModel, SoftDeleteModel


class AccountType(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    USER = 'user', 'User'


class Account(AbstractUser, TimestampedModel):
    """
    Base identity record.

    Administrators and end users share this table and are told apart by
    ``account_type``. ``status`` drives ``is_active`` so pending and
    disabled accounts cannot authenticate.
    """

    class Status(models.IntegerChoices):
        PENDING = -1, 'Pending'
        DISABLED = 0, 'Disabled'
        NORMAL = 1, 'Normal'

    account_type = models.CharField(
        max_length=10,
        choices=AccountType.choices,
        default=AccountType.USER,
        db_index=True
    )
    status = models.SmallIntegerField(choices=Status.choices, default=Status.NORMAL, db_index=True)
    nickname = models.CharField(max_length=64, blank=True, default='')
    phone = models.CharField(max_length=32, null=True, blank=True, unique=True)
    last_login_ip = models.GenericIPAddressField(null=True, blank=True)
    last_login_time = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'gpa_account'
        ordering = ['-id']

    def __str__(self):
        return f"{self.username} ({self.account_type})"

    def save(self, *args, **kwargs):
        self.is_active = self.status == self.Status.NORMAL
        super().save(*args, **kwargs)

    @property
    def is_admin(self):
        return self.account_type == AccountType.ADMIN

    @property
    def is_super_admin(self):
        if not self.is_admin:
            return False
        try:
            return self.admin_profile.is_super
        except AdminProfile.DoesNotExist:
            return False


class AdminProfile(models.Model):
    """Administrator specific attributes."""

    account = models.OneToOneField(Account, on_delete=models.CASCADE, related_name='admin_profile')
    is_super = models.BooleanField(default=False)

    class Meta:
        db_table = 'gpa_admin'

    def __str__(self):
        return f"AdminProfile({self.account_id}, super={self.is_super})"


class Role(TimestampedModel):
    """A named bundle of menus for one account type."""

    role_name = models.CharField(max_length=64)
    role_code = models.CharField(max_length=64)
    account_type = models.CharField(max_length=10, choices=AccountType.choices, default=AccountType.ADMIN)
    description = models.CharField(max_length=255, blank=True, default='')
    status = models.SmallIntegerField(default=1)
    sort = models.IntegerField(default=0)

    class Meta:
        db_table = 'gpa_role'
        ordering = ['sort', 'id']
        unique_together = [('account_type', 'role_code')]

    def __str__(self):
        return self.role_name


class UserRole(models.Model):
    account = models.ForeignKey(Account, on_delete=models.CASCADE, related_name='user_roles')
    role = models.ForeignKey(Role, on_delete=models.CASCADE, related_name='role_users')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'gpa_user_role'
        unique_together = [('account', 'role')]


class Department(TimestampedModel, SoftDeleteModel):
    """
    Organisational unit.

    ``parent_id`` is ``0`` for top level departments. ``full_parent_id``
    holds the ancestor chain as ``1,4`` and is rewritten whenever a
    department moves.
    """

    department_code = models.CharField(max_length=64, blank=True, default='')
    department_name = models.CharField(max_length=128)
    manager = models.ForeignKey(
        Account,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='managed_departments'
    )
    description = models.CharField(max_length=255, blank=True, default='')
    parent_id = models.BigIntegerField(default=0, db_index=True)
    full_parent_id = models.CharField(max_length=255, blank=True, default='')
    status = models.SmallIntegerField(default=1)
    sort_order = models.IntegerField(default=0)

    class Meta:
        db_table = 'gpa_department'
        ordering = ['sort_order', 'id']

    def __str__(self):
        return self.department_name
