"""
Menu Admin Configuration
"""

from django.contrib import admin

from .models import Menu


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = [
        'menu_name', 'menu_key', 'account_type', 'menu_type',
        'parent_id', 'module', 'sort', 'status', 'is_system'
    ]
    list_filter = ['account_type', 'menu_type', 'status', 'is_system', 'module']
    search_fields = ['menu_name', 'menu_key', 'menu_path']
    readonly_fields = ['created_at', 'updated_at', 'deleted_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('module')
