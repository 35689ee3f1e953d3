"""
SMS log queries and recording.
"""

from typing import Any, Dict, Optional

from admin_core.accounts.serializers import get_client_ip
from admin_core.core.services import BaseService, ValidationServiceError

from .filters import SmsLogFilter
from .models import SmsLog, SmsType, SourceType
from .serializers import SmsLogSerializer


def _options(choices):
    return [{'label': value, 'value': value} for value, _ in choices]


class SmsLogService(BaseService):
    """
    SMS send history.
    """

    def page(self, params) -> Dict[str, Any]:
        queryset = SmsLogFilter.apply(params, SmsLog.objects.select_related('account'))
        return self.paginate(queryset.order_by('-id'), params, SmsLogSerializer)

    def search_options(self) -> Dict[str, Any]:
        """Choices for the list page's search form"""
        return {
            'sms_type': _options(SmsType.choices),
            'source_type': _options(SourceType.choices),
            'status': [
                {'label': SmsLog.Status.SUCCESS.label, 'value': SmsLog.Status.SUCCESS.value},
                {'label': SmsLog.Status.FAILURE.label, 'value': SmsLog.Status.FAILURE.value},
            ],
        }

    def record(self, phone: str, sms_type: str, content: str = '', error_message: str = '',
               source_type: Optional[str] = None, expire_minutes: int = 0,
               extend_data: Optional[Dict[str, Any]] = None) -> SmsLog:
        """
        Store one send attempt. A non-empty ``error_message`` marks it failed.
        """
        if not phone:
            raise ValidationServiceError("Missing required fields: phone")
        if sms_type not in SmsType.values:
            raise ValidationServiceError(f"Invalid sms_type: {sms_type}")

        account = self.user if self.user is not None and getattr(self.user, 'is_authenticated', False) else None
        log = SmsLog.objects.create(
            account=account,
            source_type=source_type or SourceType.ADMIN,
            sms_type=sms_type,
            phone=phone,
            content=content,
            status=SmsLog.Status.FAILURE if error_message else SmsLog.Status.SUCCESS,
            error_message=error_message,
            ip_address=get_client_ip(self.request),
            expire_minutes=expire_minutes,
            extend_data=extend_data or {},
        )

        if error_message:
            self._log_operation('sms_failed', {'phone': phone, 'sms_type': sms_type, 'error': error_message}, level='warning')
        else:
            self._log_operation('sms_sent', {'phone': phone, 'sms_type': sms_type})
        return log
