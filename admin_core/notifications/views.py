"""
Notification Views
"""

from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from admin_core.core.permissions import IsAdminAccount
from admin_core.core.views import ServiceViewSet

from .services import (
    AnnouncementService,
    MessageService,
    NotificationReadService,
    SystemNotificationService,
)


class NoticeViewSet(ServiceViewSet):
    """
    Paged list, create, update and soft delete for one notice type.
    """
    permission_classes = [IsAdminAccount]

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    def create(self, request):
        return Response(self.get_service().add(self.body()), status=201)

    def update(self, request, pk=None):
        return Response(self.get_service().update(self.body(id=pk)))

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    def destroy(self, request, pk=None):
        return Response(self.get_service().delete(pk))


class AnnouncementViewSet(NoticeViewSet):
    service_class = AnnouncementService


class SystemNotificationViewSet(NoticeViewSet):
    service_class = SystemNotificationService


class MessageViewSet(NoticeViewSet):
    service_class = MessageService

    def get_permissions(self):
        if self.action == 'inbox':
            return [IsAuthenticated()]
        return super().get_permissions()

    @action(detail=False, methods=['get'])
    def inbox(self, request):
        return Response(self.get_service().inbox(self.params()))


class NotificationReadViewSet(ServiceViewSet):
    """
    Read records of one item; any signed-in account may mark items read.
    """
    service_class = NotificationReadService
    permission_classes = [IsAdminAccount]

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated()]
        return super().get_permissions()

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    def create(self, request):
        return Response(self.get_service().mark_read(self.body()))
