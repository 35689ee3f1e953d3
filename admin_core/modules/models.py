"""
Module System Models
"""

from django.conf import settings
from django.db import models

from admin_core.core.models import TimestampedModel


class Module(TimestampedModel):
    """
    A pluggable package living under ``Modules/<name>``.

    Rows are created and refreshed from the package's ``module.json``.
    """

    class PullType(models.TextChoices):
        GIT = 'git', 'Git submodule'
        URL = 'url', 'Zip download'

    name = models.CharField(max_length=100, unique=True)
    alias = models.CharField(max_length=100, blank=True, default='')
    title = models.CharField(max_length=100, blank=True, default='')
    description = models.TextField(blank=True, default='')
    icon = models.CharField(max_length=255, blank=True, default='')
    version = models.CharField(max_length=50, blank=True, default='')
    priority = models.IntegerField(default=0)
    source = models.CharField(max_length=50, blank=True, default='')
    status = models.SmallIntegerField(default=1, db_index=True)
    is_core = models.BooleanField(default=False)
    is_installed = models.BooleanField(default=False, db_index=True)
    installed_at = models.DateTimeField(null=True, blank=True)

    author = models.CharField(max_length=100, blank=True, default='')
    author_email = models.CharField(max_length=255, blank=True, default='')
    homepage = models.CharField(max_length=255, blank=True, default='')
    keywords = models.JSONField(default=list, blank=True)
    providers = models.JSONField(default=list, blank=True)
    dependencies = models.JSONField(default=list, blank=True)

    pull_type = models.CharField(max_length=10, choices=PullType.choices, blank=True, default='')
    pull_url = models.CharField(max_length=500, blank=True, default='')
    uploader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='uploaded_modules'
    )

    class Meta:
        db_table = 'gpa_module'
        ordering = ['-priority', 'id']

    def __str__(self):
        return self.title or self.name

    @property
    def is_enabled(self):
        return self.status == 1

    @property
    def slug(self):
        """Route prefix used when no menu path is available."""
        return self.alias or self.name.lower()


class AccountModule(models.Model):
    """A module installed for one account, with that account's ordering."""

    account = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='account_modules')
    module = models.ForeignKey(Module, on_delete=models.CASCADE, related_name='account_modules')
    sort = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'gpa_account_module'
        unique_together = [('account', 'module')]
        ordering = ['sort', 'id']
