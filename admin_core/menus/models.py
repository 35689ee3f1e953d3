"""
Menu models.

Menus are flat rows linked by ``parent_id`` (``0`` for top level) and are
assembled into trees at request time.
"""

from django.db import models

from admin_core.accounts.models import AccountType
from admin_core.core.models import TimestampedModel, SoftDeleteModel


class Menu(TimestampedModel, SoftDeleteModel):

    class MenuType(models.TextChoices):
        DIR = 'dir', 'Directory'
        MENU = 'menu', 'Menu'
        BUTTON = 'button', 'Button'

    account_type = models.CharField(max_length=10, choices=AccountType.choices, default=AccountType.ADMIN)
    menu_name = models.CharField(max_length=100)
    menu_key = models.CharField(max_length=100)
    menu_path = models.CharField(max_length=255, blank=True, default='')
    menu_icon = models.CharField(max_length=100, blank=True, default='')
    menu_type = models.CharField(max_length=10, choices=MenuType.choices, default=MenuType.MENU)
    parent_id = models.BigIntegerField(default=0, db_index=True)
    module = models.ForeignKey(
        'modules.Module',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='menus'
    )
    component = models.CharField(max_length=255, null=True, blank=True)
    redirect = models.CharField(max_length=255, null=True, blank=True)
    is_required = models.BooleanField(default=False)
    sort = models.IntegerField(default=0)
    status = models.SmallIntegerField(default=1, db_index=True)
    is_system = models.BooleanField(default=False)

    class Meta:
        db_table = 'gpa_menu'
        ordering = ['sort', 'id']
        constraints = [
            models.UniqueConstraint(fields=['account_type', 'menu_key'], name='uniq_menu_account_type_key'),
        ]

    def __str__(self):
        return f"{self.menu_name} ({self.menu_key})"


class RoleMenu(models.Model):
    role = models.ForeignKey('accounts.Role', on_delete=models.CASCADE, related_name='role_menus')
    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name='role_menus')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'gpa_role_menu'
        unique_together = [('role', 'menu')]


class ModuleMenu(models.Model):
    """Menus shipped by a module."""
    module = models.ForeignKey('modules.Module', on_delete=models.CASCADE, related_name='module_menus')
    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name='module_links')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'gpa_module_menu'
        unique_together = [('module', 'menu')]
