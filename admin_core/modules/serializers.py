"""
Module System Serializers
"""

from rest_framework import serializers

from .models import Module, AccountModule


class ModuleSerializer(serializers.ModelSerializer):
    """Serializer for modules"""
    module_id = serializers.IntegerField(source='id', read_only=True)
    account_installed = serializers.BooleanField(read_only=True, required=False)

    class Meta:
        model = Module
        fields = [
            'module_id', 'name', 'alias', 'title', 'description', 'icon',
            'version', 'priority', 'source', 'status', 'is_core',
            'is_installed', 'installed_at', 'author', 'author_email',
            'homepage', 'keywords', 'providers', 'dependencies',
            'pull_type', 'pull_url', 'account_installed',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class AccountModuleSortSerializer(serializers.ModelSerializer):
    """An account's installed module with its position"""
    module_name = serializers.CharField(source='module.name', read_only=True)
    module_title = serializers.CharField(source='module.title', read_only=True)

    class Meta:
        model = AccountModule
        fields = ['module_id', 'module_name', 'module_title', 'sort']
        read_only_fields = fields
