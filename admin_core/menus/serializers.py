"""
Menu Serializers
"""

from rest_framework import serializers

from .models import Menu


class MenuSerializer(serializers.ModelSerializer):
    """Serializer for menus with every column"""
    module_id = serializers.IntegerField(read_only=True)
    module_name = serializers.CharField(source='module.name', read_only=True, default=None)

    class Meta:
        model = Menu
        fields = [
            'id', 'account_type', 'menu_name', 'menu_key', 'menu_path',
            'menu_icon', 'menu_type', 'parent_id', 'module_id', 'module_name',
            'component', 'redirect', 'is_required', 'sort', 'status',
            'is_system', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
