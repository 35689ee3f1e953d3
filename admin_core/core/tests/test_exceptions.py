"""Tests for the REST exception handler."""

from django.test import SimpleTestCase
from rest_framework.exceptions import NotAuthenticated

from admin_core.modules.exceptions import ModuleNotFoundError, ModulePullError

from ..exceptions import service_exception_handler
from ..services import NotFoundServiceError, PermissionServiceError, ValidationServiceError


class ServiceExceptionHandlerTests(SimpleTestCase):

    def handle(self, exc):
        return service_exception_handler(exc, {'view': None})

    def test_service_errors(self):
        cases = [
            (ValidationServiceError('bad input'), 400),
            (PermissionServiceError('nope'), 403),
            (NotFoundServiceError('gone'), 404),
        ]
        for exc, code in cases:
            response = self.handle(exc)
            self.assertEqual(response.status_code, code)
            self.assertEqual(response.data, {'error': str(exc)})

    def test_module_errors(self):
        self.assertEqual(self.handle(ModuleNotFoundError('Module 9 does not exist')).status_code, 404)
        self.assertEqual(self.handle(ModulePullError('git failed')).status_code, 400)

    def test_other_errors_use_drf_default(self):
        response = self.handle(NotAuthenticated())

        self.assertEqual(response.status_code, 401)

    def test_unknown_errors_are_left_alone(self):
        self.assertIsNone(self.handle(RuntimeError('boom')))
