"""
Module System Admin Configuration
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import AccountModule, Module


@admin.register(Module)
class ModuleAdmin(admin.ModelAdmin):
    list_display = [
        'name', 'title', 'version', 'priority', 'pull_type',
        'is_core', 'installed_badge', 'installed_at'
    ]
    list_filter = ['status', 'is_core', 'is_installed', 'pull_type']
    search_fields = ['name', 'alias', 'title', 'description']
    readonly_fields = ['installed_at', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'alias', 'title', 'description', 'icon', 'version', 'priority')
        }),
        ('Author Information', {
            'fields': ('author', 'author_email', 'homepage')
        }),
        ('Source', {
            'fields': ('source', 'pull_type', 'pull_url', 'uploader')
        }),
        ('Configuration', {
            'fields': ('keywords', 'providers', 'dependencies'),
            'classes': ('collapse',)
        }),
        ('State', {
            'fields': ('status', 'is_core', 'is_installed', 'installed_at', 'created_at', 'updated_at')
        }),
    )

    def installed_badge(self, obj):
        if obj.is_installed:
            return format_html('<span style="color: green;">{}</span>', 'Installed')
        return format_html('<span style="color: gray;">{}</span>', 'Not installed')
    installed_badge.short_description = 'Installed'


@admin.register(AccountModule)
class AccountModuleAdmin(admin.ModelAdmin):
    list_display = ['account', 'module', 'sort', 'created_at']
    search_fields = ['account__username', 'module__name']
    raw_id_fields = ['account', 'module']
