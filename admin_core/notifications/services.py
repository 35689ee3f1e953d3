"""
Notification services.

Announcements, system notifications and messages share one CRUD shape:
paged list, add with defaults, partial update and soft delete. Read
records are kept by ``NotificationReadService``.
"""

from typing import Any, Dict, List

from django.contrib.auth import get_user_model

from admin_core.core.services import BaseService, ValidationServiceError

from .filters import (
    AnnouncementFilter,
    MessageFilter,
    NotificationReadFilter,
    SystemNotificationFilter,
)
from .models import Announcement, Message, NotificationRead, SystemNotification
from .serializers import (
    AnnouncementSerializer,
    MessageSerializer,
    NotificationReadSerializer,
    SystemNotificationSerializer,
)


class NoticeService(BaseService):
    """
    CRUD for one notice model.

    Subclasses name the model, its serializer, the list filterset, the
    fields accepted on create and update and the defaults applied on create.
    """
    model = None
    serializer_class = None
    label = 'notice'
    filterset_class = None
    required_fields: List[str] = ['title', 'content']
    create_fields: List[str] = []
    update_fields: List[str] = []
    defaults: Dict[str, Any] = {}

    def get_queryset(self):
        return self.model.objects.all()

    def filter_queryset(self, queryset, params):
        return self.filterset_class.apply(params, queryset)

    def page(self, params) -> Dict[str, Any]:
        queryset = self.filter_queryset(self.get_queryset(), params)
        return self.paginate(queryset.order_by('-id'), params, self.serializer_class)

    def get_object(self, object_id):
        if object_id in (None, ''):
            raise ValidationServiceError("Missing required fields: id")
        try:
            object_id = int(object_id)
        except (TypeError, ValueError):
            raise ValidationServiceError(f"Invalid id: {object_id}")
        return self.get_or_404(self.model, message=f"{self.label.capitalize()} not found", pk=object_id)

    @staticmethod
    def _strip(data: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value.strip() if isinstance(value, str) else value for key, value in data.items()}

    def creation_defaults(self, data: Dict[str, Any]) -> Dict[str, Any]:
        defaults = dict(self.defaults)
        if self.user is not None and getattr(self.user, 'is_authenticated', False):
            defaults['account'] = self.user
        return defaults

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = self._strip(data)
        self._require_params(data, self.required_fields)

        values = self.creation_defaults(data)
        for field in self.create_fields:
            if data.get(field) is not None:
                values[field] = data[field]

        instance = self._execute_with_transaction(self.model.objects.create, **values)
        self._log_operation(f"add_{self.label}", {'id': instance.pk, 'title': instance.title})
        return {'id': instance.pk}

    def update(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = self._strip(data)
        self._require_params(data, ['id', 'title'])
        instance = self.get_object(data['id'])

        instance.title = data['title']
        changed = ['title'] + self._assign(
            instance,
            {key: value for key, value in data.items() if value is not None},
            self.update_fields
        )
        self._execute_with_transaction(instance.save)

        self._log_operation(f"update_{self.label}", {'id': instance.pk, 'fields': changed})
        return {'id': instance.pk}

    def delete(self, object_id) -> Dict[str, Any]:
        instance = self.get_object(object_id)
        instance.delete()
        self._log_operation(f"delete_{self.label}", {'id': instance.pk, 'title': instance.title})
        return {'id': instance.pk}


class AnnouncementService(NoticeService):
    model = Announcement
    serializer_class = AnnouncementSerializer
    label = 'announcement'
    filterset_class = AnnouncementFilter
    create_fields = ['title', 'content', 'target_platform', 'position', 'start_time', 'end_time', 'status']
    update_fields = ['content', 'target_platform', 'position', 'start_time', 'end_time', 'status']
    defaults = {
        'status': Announcement.Status.NORMAL,
        'target_platform': 'all',
        'position': 'home',
    }


class SystemNotificationService(NoticeService):
    model = SystemNotification
    serializer_class = SystemNotificationSerializer
    label = 'system_notification'
    filterset_class = SystemNotificationFilter
    create_fields = ['title', 'content', 'target_platform', 'type', 'status']
    update_fields = ['content', 'target_platform', 'type', 'status']
    defaults = {
        'status': SystemNotification.Status.NORMAL,
        'target_platform': 'all',
    }


class MessageService(NoticeService):
    model = Message
    serializer_class = MessageSerializer
    label = 'message'
    filterset_class = MessageFilter
    required_fields = ['title', 'content', 'receiver_id']
    create_fields = ['sender_id', 'receiver_id', 'title', 'content', 'target_platform', 'status']
    update_fields = ['content', 'target_platform', 'status']
    defaults = {
        'status': Message.Status.UNREAD,
        'target_platform': 'all',
    }

    def creation_defaults(self, data: Dict[str, Any]) -> Dict[str, Any]:
        defaults = super().creation_defaults(data)
        if 'account' in defaults and data.get('sender_id') in (None, ''):
            defaults['sender'] = defaults['account']
        return defaults

    def add(self, data: Dict[str, Any]) -> Dict[str, Any]:
        receiver_id = data.get('receiver_id')
        if receiver_id not in (None, '') and not get_user_model().objects.filter(pk=receiver_id).exists():
            raise ValidationServiceError("Receiver does not exist")
        return super().add(data)

    def inbox(self, params) -> Dict[str, Any]:
        """Messages received by the current account"""
        account = self._require_user()
        queryset = self.filter_queryset(Message.objects.filter(receiver=account), params)
        return self.paginate(queryset.order_by('status', '-id'), params, MessageSerializer)


READ_TARGETS = {
    NotificationRead.ReadType.ANNOUNCEMENT.value: Announcement,
    NotificationRead.ReadType.SYSTEM_NOTIFICATION.value: SystemNotification,
    NotificationRead.ReadType.MESSAGE.value: Message,
}


class NotificationReadService(BaseService):
    """
    Who has read what.
    """

    def page(self, params) -> Dict[str, Any]:
        if not params.get('read_type') or not params.get('target_id'):
            raise ValidationServiceError("Missing required fields: read_type, target_id")

        queryset = NotificationRead.objects.filter(
            read_type=params['read_type'],
            target_id=params['target_id'],
        ).select_related('account')
        queryset = NotificationReadFilter.apply(params, queryset)
        return self.paginate(queryset.order_by('-read_at', '-id'), params, NotificationReadSerializer)

    def mark_read(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Record that the current account has read an item.

        Reading twice keeps the first record. A message read by its
        receiver is flagged read.
        """
        account = self._require_user()
        self._require_params(data, ['read_type', 'target_id'])

        read_type = data['read_type']
        model = READ_TARGETS.get(read_type)
        if model is None:
            raise ValidationServiceError(f"Invalid read_type: {read_type}")
        try:
            target_id = int(data['target_id'])
        except (TypeError, ValueError):
            raise ValidationServiceError(f"Invalid target_id: {data['target_id']}")
        target = self.get_or_404(model, message="Notification not found", pk=target_id)

        def _mark():
            record, created = NotificationRead.objects.get_or_create(
                read_type=read_type,
                target_id=target.pk,
                account=account,
            )

            if model is Message and target.receiver_id == account.pk and target.status != Message.Status.READ:
                target.status = Message.Status.READ
                target.save(update_fields=['status', 'updated_at'])
            return record, created

        record, created = self._execute_with_transaction(_mark)
        if created:
            self._log_operation('mark_read', {'read_type': read_type, 'target_id': target.pk})
        return {'id': record.pk, 'read_at': record.read_at, 'created': created}
