"""
SMS Serializers
"""

from rest_framework import serializers

from .models import SmsLog


class SmsLogSerializer(serializers.ModelSerializer):
    account_id = serializers.IntegerField(read_only=True)
    account_username = serializers.CharField(source='account.username', read_only=True, default='')

    class Meta:
        model = SmsLog
        fields = [
            'id', 'account_id', 'account_username', 'source_type', 'sms_type',
            'phone', 'content', 'status', 'error_message', 'ip_address',
            'ip_location', 'expire_minutes', 'extend_data', 'created_at'
        ]
        read_only_fields = fields
