"""Tests for the list filter building blocks."""

from datetime import datetime, time, timedelta

from django.http import QueryDict
from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from admin_core.accounts.filters import AccountFilter
from admin_core.accounts.models import Account
from admin_core.core.filters import param_list
from admin_core.core.services import ValidationServiceError
from admin_core.notifications.filters import AnnouncementFilter
from admin_core.notifications.models import Announcement


class ParamListTests(SimpleTestCase):
    """Test param_list."""

    def test_repeated_keys(self):
        params = QueryDict('status=1&status=0')
        self.assertEqual(param_list(params, 'status'), ['1', '0'])

    def test_bracket_keys(self):
        params = QueryDict('status[]=1&status[]=-1')
        self.assertEqual(param_list(params, 'status'), ['1', '-1'])

    def test_comma_separated_string(self):
        self.assertEqual(param_list({'platform': 'web, app ,'}, 'platform'), ['web', 'app'])

    def test_json_list(self):
        self.assertEqual(param_list({'ids': [1, 2]}, 'ids'), [1, 2])

    def test_missing(self):
        self.assertEqual(param_list({}, 'ids'), [])


class AccountFilterTests(TestCase):
    """Test AccountFilter."""

    def setUp(self):
        self.alice = Account.objects.create_user(username='alice', password='x', nickname='Al', status=1)
        self.bob = Account.objects.create_user(username='bob', password='x', phone='13800000000', status=0)
        self.carol = Account.objects.create_user(username='carol', password='x', status=-1)

    def _usernames(self, params):
        queryset = AccountFilter.apply(params, Account.objects.all())
        return sorted(queryset.values_list('username', flat=True))

    def test_username_contains(self):
        self.assertEqual(self._usernames({'username': 'AL'}), ['alice'])

    def test_status_one_or_many(self):
        self.assertEqual(self._usernames({'status': 0}), ['bob'])
        self.assertEqual(self._usernames(QueryDict('status=0&status=-1')), ['bob', 'carol'])
        self.assertEqual(self._usernames(QueryDict('status[]=1&status[]=-1')), ['alice', 'carol'])

    def test_keyword_searches_several_fields(self):
        self.assertEqual(self._usernames({'keyword': '1380'}), ['bob'])
        self.assertEqual(self._usernames({'keyword': 'al'}), ['alice'])

    def test_blank_values_ignored(self):
        self.assertEqual(
            self._usernames({'username': '', 'status': None, 'created_at': []}),
            ['alice', 'bob', 'carol']
        )

    def test_invalid_status(self):
        with self.assertRaises(ValidationServiceError):
            self._usernames({'status': 'abc'})

    def test_invalid_date(self):
        with self.assertRaises(ValidationServiceError):
            self._usernames({'created_at': ['yesterday']})

    def test_date_range(self):
        Account.objects.filter(pk=self.alice.pk).update(created_at=timezone.now() - timedelta(days=10))
        today = timezone.now().date().isoformat()

        self.assertEqual(self._usernames({'created_at': [today, today]}), ['bob', 'carol'])

    def test_date_only_end_covers_the_whole_day(self):
        today = timezone.now().date()
        late = timezone.make_aware(datetime.combine(today, time(23, 30)))
        Account.objects.filter(pk=self.alice.pk).update(created_at=late)
        Account.objects.filter(pk=self.bob.pk).update(created_at=late + timedelta(days=1))

        names = self._usernames({'created_at': ['', today.isoformat()]})

        self.assertIn('alice', names)
        self.assertNotIn('bob', names)

    def test_suffixed_range_keys(self):
        Account.objects.filter(pk=self.alice.pk).update(created_at=timezone.now() - timedelta(days=10))
        since = (timezone.now() - timedelta(days=1)).date().isoformat()

        self.assertEqual(self._usernames({'created_at_after': since}), ['bob', 'carol'])


class DateTimeRangeTests(TestCase):
    """Test the ``time_range`` bounds of notice lists."""

    def test_datetime_bounds(self):
        morning = Announcement.objects.create(title='Morning', content='x')
        evening = Announcement.objects.create(title='Evening', content='x')
        day = timezone.now().date() - timedelta(days=1)
        Announcement.objects.filter(pk=morning.pk).update(
            created_at=timezone.make_aware(datetime.combine(day, time(8, 0)))
        )
        Announcement.objects.filter(pk=evening.pk).update(
            created_at=timezone.make_aware(datetime.combine(day, time(20, 0)))
        )

        params = {'time_range': [f'{day.isoformat()} 07:00:00', f'{day.isoformat()} 12:00:00']}
        titles = list(AnnouncementFilter.apply(params, Announcement.objects.all()).values_list('title', flat=True))

        self.assertEqual(titles, ['Morning'])
