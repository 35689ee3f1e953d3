"""
Account Serializers
"""

from django.utils import timezone
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import Account, Role, Department


def get_client_ip(request):
    """Client address, honouring the first ``X-Forwarded-For`` hop."""
    if request is None:
        return None
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class AccountSerializer(serializers.ModelSerializer):
    """Serializer for admin and user accounts"""
    account_id = serializers.IntegerField(source='id', read_only=True)
    is_super = serializers.SerializerMethodField()

    class Meta:
        model = Account
        fields = [
            'account_id', 'username', 'nickname', 'phone', 'email',
            'account_type', 'status', 'is_super', 'last_login_ip',
            'last_login_time', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_is_super(self, obj):
        return obj.is_super_admin


class RoleSerializer(serializers.ModelSerializer):
    """Serializer for roles"""

    class Meta:
        model = Role
        fields = [
            'id', 'role_name', 'role_code', 'account_type', 'description',
            'status', 'sort', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class AccountDetailSerializer(AccountSerializer):
    """Account serializer including the assigned roles"""
    roles = serializers.SerializerMethodField()

    class Meta(AccountSerializer.Meta):
        fields = AccountSerializer.Meta.fields + ['roles']
        read_only_fields = fields

    def get_roles(self, obj):
        roles = Role.objects.filter(role_users__account=obj).order_by('sort', 'id')
        return RoleSerializer(roles, many=True).data


class DepartmentSerializer(serializers.ModelSerializer):
    """Serializer for departments"""
    manager_name = serializers.SerializerMethodField()

    class Meta:
        model = Department
        fields = [
            'id', 'department_code', 'department_name', 'manager', 'manager_name',
            'description', 'parent_id', 'full_parent_id', 'status', 'sort_order',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_manager_name(self, obj):
        if not obj.manager_id:
            return None
        return obj.manager.nickname or obj.manager.username


class AccountTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Token obtain serializer that records the login address and time.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['account_type'] = user.account_type
        return token

    def validate(self, attrs):
        data = super().validate(attrs)

        account = self.user
        account.last_login_ip = get_client_ip(self.context.get('request'))
        account.last_login_time = timezone.now()
        account.save(update_fields=['last_login_ip', 'last_login_time'])

        data['account'] = AccountSerializer(account).data
        return data
