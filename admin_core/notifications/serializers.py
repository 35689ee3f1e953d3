"""
Notification Serializers
"""

from rest_framework import serializers

from .models import Announcement, Message, NotificationRead, SystemNotification


class AnnouncementSerializer(serializers.ModelSerializer):
    account_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Announcement
        fields = [
            'id', 'title', 'content', 'target_platform', 'position',
            'start_time', 'end_time', 'status', 'account_id',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class SystemNotificationSerializer(serializers.ModelSerializer):
    account_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = SystemNotification
        fields = [
            'id', 'title', 'content', 'target_platform', 'type', 'status',
            'account_id', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class MessageSerializer(serializers.ModelSerializer):
    """Message with the sender and receiver ids flattened"""
    sender_id = serializers.IntegerField(read_only=True)
    receiver_id = serializers.IntegerField(read_only=True)
    account_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Message
        fields = [
            'id', 'sender_id', 'receiver_id', 'title', 'content',
            'target_platform', 'status', 'account_id', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class NotificationReadSerializer(serializers.ModelSerializer):
    """Read record with the reader's username and nickname"""
    account_id = serializers.IntegerField(read_only=True)
    account_username = serializers.SerializerMethodField()
    account_nickname = serializers.SerializerMethodField()

    class Meta:
        model = NotificationRead
        fields = [
            'id', 'read_type', 'target_id', 'account_id', 'read_at',
            'account_username', 'account_nickname'
        ]
        read_only_fields = fields

    def get_account_username(self, obj):
        return obj.account.username if obj.account_id else ''

    def get_account_nickname(self, obj):
        return obj.account.nickname if obj.account_id else ''
