"""
SMS Views
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from admin_core.core.permissions import IsAdminAccount
from admin_core.core.views import ServiceViewSet

from .services import SmsLogService


class SmsLogViewSet(ServiceViewSet):
    """SMS send history for administrators."""
    service_class = SmsLogService
    permission_classes = [IsAdminAccount]

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    @action(detail=False, methods=['get'], url_path='search-options')
    def search_options(self, request):
        return Response(self.get_service().search_options())
