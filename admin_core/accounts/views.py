"""
Account Views
"""

from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView

from admin_core.core.permissions import IsAdminAccount
from admin_core.core.views import ServiceViewSet

from .serializers import AccountTokenObtainPairSerializer, AccountDetailSerializer
from .services import AdminService, UserService, RoleService, DepartmentService


class AccountTokenObtainPairView(TokenObtainPairView):
    """
    Login view.

    Returns JWT tokens and records the client address on the account.
    """
    serializer_class = AccountTokenObtainPairSerializer


class ProfileViewSet(ServiceViewSet):
    """The authenticated account."""

    def list(self, request):
        return Response(AccountDetailSerializer(request.user).data)


class AccountViewSet(ServiceViewSet):
    """
    CRUD over one account type.
    """
    permission_classes = [IsAdminAccount]

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    def retrieve(self, request, pk=None):
        return Response(self.get_service().detail(pk))

    def create(self, request):
        return Response(self.get_service().add(self.body()), status=201)

    def update(self, request, pk=None):
        return Response(self.get_service().update(self.body(account_id=pk)))

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    def destroy(self, request, pk=None):
        return Response(self.get_service().delete(pk))


class AdminViewSet(AccountViewSet):
    service_class = AdminService


class UserViewSet(AccountViewSet):
    service_class = UserService

    @action(detail=True, methods=['post'])
    def audit(self, request, pk=None):
        """Approve (``status=1``) or reject a pending user"""
        return Response(self.get_service().audit(self.body(account_id=pk)))


class RoleViewSet(ServiceViewSet):
    """
    Roles per account type and their assignment to accounts.
    """
    service_class = RoleService
    permission_classes = [IsAdminAccount]

    def list(self, request):
        return Response(self.get_service().page(self.params()))

    @action(detail=False, methods=['get'])
    def all(self, request):
        return Response(self.get_service().all(self.params()))

    def create(self, request):
        return Response(self.get_service().add(self.body()), status=201)

    def update(self, request, pk=None):
        return Response(self.get_service().update(self.body(id=pk)))

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    def destroy(self, request, pk=None):
        return Response(self.get_service().delete(pk))

    @action(detail=False, methods=['post'])
    def assign(self, request):
        return Response(self.get_service().assign_roles(self.body()))


class DepartmentViewSet(ServiceViewSet):
    service_class = DepartmentService
    permission_classes = [IsAdminAccount]

    def list(self, request):
        return Response(self.get_service().all())

    @action(detail=False, methods=['get'])
    def tree(self, request):
        return Response(self.get_service().tree(self.params()))

    def create(self, request):
        return Response(self.get_service().add(self.body()), status=201)

    def update(self, request, pk=None):
        return Response(self.get_service().update(self.body(id=pk)))

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    def destroy(self, request, pk=None):
        return Response(self.get_service().delete(pk))
