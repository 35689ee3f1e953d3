"""Tests for AdminPagination."""

from django.test import TestCase
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from admin_core.accounts.models import Account
from admin_core.accounts.serializers import AccountSerializer
from admin_core.core.pagination import AdminPagination


class AdminPaginationTests(TestCase):
    """Test AdminPagination."""

    def setUp(self):
        for index in range(12):
            Account.objects.create_user(username=f'user{index:02d}', password='x')
        self.queryset = Account.objects.order_by('username')

    def test_envelope(self):
        result = AdminPagination().paginate(self.queryset, {'page': 2, 'pageSize': 5})

        self.assertEqual(result['total'], 12)
        self.assertEqual(result['page'], 2)
        self.assertEqual(result['page_size'], 5)
        self.assertEqual([a.username for a in result['list']], [f'user{i:02d}' for i in range(5, 10)])

    def test_current_and_page_size_aliases(self):
        result = AdminPagination().paginate(self.queryset, {'current': 3, 'page_size': 5})

        self.assertEqual(result['page'], 3)
        self.assertEqual([a.username for a in result['list']], ['user10', 'user11'])

    def test_defaults_and_bad_values(self):
        result = AdminPagination().paginate(self.queryset, {'page': 'x', 'page_size': -3})

        self.assertEqual(result['page'], 1)
        self.assertEqual(result['page_size'], 10)
        self.assertEqual(len(result['list']), 10)

    def test_page_past_the_end_is_empty(self):
        result = AdminPagination().paginate(self.queryset, {'page': 9})

        self.assertEqual(result['list'], [])
        self.assertEqual(result['total'], 12)
        self.assertEqual(result['page'], 9)

    def test_page_size_is_capped(self):
        result = AdminPagination().paginate(self.queryset, {'pageSize': 100000})

        self.assertEqual(result['page_size'], AdminPagination.max_page_size)

    def test_serializer(self):
        result = AdminPagination().paginate(self.queryset, {'pageSize': 2}, AccountSerializer)

        self.assertEqual([row['username'] for row in result['list']], ['user00', 'user01'])

    def test_rest_framework_hooks(self):
        request = Request(APIRequestFactory().get('/', {'current': 2, 'pageSize': 5}))
        paginator = AdminPagination()

        page = paginator.paginate_queryset(self.queryset, request)
        response = paginator.get_paginated_response([account.username for account in page])

        self.assertEqual(response.data, {
            'list': [f'user{i:02d}' for i in range(5, 10)],
            'total': 12,
            'page': 2,
            'page_size': 5,
        })
