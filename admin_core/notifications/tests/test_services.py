"""Tests for notification services."""

from datetime import timedelta

from django.http import QueryDict
from django.test import TestCase
from django.utils import timezone

from admin_core.accounts.models import Account, AccountType
from admin_core.core.services import NotFoundServiceError, PermissionServiceError, ValidationServiceError

from ..models import Announcement, Message, NotificationRead, SystemNotification
from ..services import (
    AnnouncementService,
    MessageService,
    NotificationReadService,
    SystemNotificationService,
)


class AnnouncementServiceTests(TestCase):
    """Test AnnouncementService."""

    def setUp(self):
        self.admin = Account.objects.create_user(username='root', password='x', account_type=AccountType.ADMIN)
        self.service = AnnouncementService(user=self.admin)

    def test_add_applies_defaults(self):
        result = self.service.add({'title': ' Maintenance ', 'content': 'Tonight'})

        announcement = Announcement.objects.get(pk=result['id'])
        self.assertEqual(announcement.title, 'Maintenance')
        self.assertEqual(announcement.target_platform, 'all')
        self.assertEqual(announcement.position, 'home')
        self.assertEqual(announcement.status, Announcement.Status.NORMAL)
        self.assertEqual(announcement.account, self.admin)

    def test_add_requires_title_and_content(self):
        with self.assertRaises(ValidationServiceError):
            self.service.add({'title': 'Only title'})

    def test_update_changes_listed_fields(self):
        announcement = Announcement.objects.create(title='Old', content='Body', position='top')

        self.service.update({'id': announcement.pk, 'title': 'New', 'status': 0})

        announcement.refresh_from_db()
        self.assertEqual(announcement.title, 'New')
        self.assertEqual(announcement.status, 0)
        self.assertEqual(announcement.position, 'top')
        self.assertEqual(announcement.content, 'Body')

    def test_update_requires_title(self):
        announcement = Announcement.objects.create(title='Old', content='Body')

        with self.assertRaises(ValidationServiceError):
            self.service.update({'id': announcement.pk})

    def test_delete_is_soft(self):
        announcement = Announcement.objects.create(title='Old', content='Body')

        self.service.delete(announcement.pk)

        self.assertFalse(Announcement.objects.filter(pk=announcement.pk).exists())
        self.assertTrue(Announcement.all_objects.filter(pk=announcement.pk).exists())
        with self.assertRaises(NotFoundServiceError):
            self.service.delete(announcement.pk)

    def test_page_filters(self):
        Announcement.objects.create(title='Release notes', content='x', position='home')
        Announcement.objects.create(title='Downtime', content='x', position='login')
        stale = Announcement.objects.create(title='Release 0.9', content='x')
        Announcement.objects.filter(pk=stale.pk).update(created_at=timezone.now() - timedelta(days=30))
        today = timezone.now().date().isoformat()

        self.assertEqual(self.service.page({'title': 'release'})['total'], 2)
        self.assertEqual(self.service.page({'position': 'log'})['total'], 1)
        self.assertEqual(self.service.page({'title': 'release', 'date_range': [today, today]})['total'], 1)


class SystemNotificationServiceTests(TestCase):

    def test_add_and_filter_by_type(self):
        service = SystemNotificationService()
        service.add({'title': 'Backup', 'content': 'done', 'type': 'ops'})
        service.add({'title': 'Welcome', 'content': 'hi'})

        self.assertEqual(service.page({'type': 'ops'})['total'], 1)
        self.assertEqual(SystemNotification.objects.get(title='Welcome').type, 'system')


class MessageServiceTests(TestCase):
    """Test MessageService."""

    def setUp(self):
        self.admin = Account.objects.create_user(username='root', password='x', account_type=AccountType.ADMIN)
        self.member = Account.objects.create_user(username='member', password='x')
        self.service = MessageService(user=self.admin)

    def test_add(self):
        result = self.service.add({'title': 'Hi', 'content': 'Hello', 'receiver_id': self.member.pk})

        message = Message.objects.get(pk=result['id'])
        self.assertEqual(message.sender, self.admin)
        self.assertEqual(message.receiver, self.member)
        self.assertEqual(message.status, Message.Status.UNREAD)

    def test_add_requires_receiver(self):
        with self.assertRaises(ValidationServiceError):
            self.service.add({'title': 'Hi', 'content': 'Hello'})
        with self.assertRaises(ValidationServiceError):
            self.service.add({'title': 'Hi', 'content': 'Hello', 'receiver_id': 9999})

    def test_platform_filter_matches_any(self):
        for platform in ('web', 'app', 'mini_program'):
            Message.objects.create(title=platform, content='x', receiver=self.member, target_platform=platform)

        self.assertEqual(self.service.page({'target_platform': 'web,app'})['total'], 2)
        self.assertEqual(self.service.page({'target_platform': ['mini']})['total'], 1)
        self.assertEqual(self.service.page(QueryDict('target_platform[]=web&target_platform[]=mini'))['total'], 2)

    def test_inbox(self):
        Message.objects.create(title='Mine', content='x', receiver=self.member)
        Message.objects.create(title='Not mine', content='x', receiver=self.admin)

        result = MessageService(user=self.member).inbox({})

        self.assertEqual([row['title'] for row in result['list']], ['Mine'])


class NotificationReadServiceTests(TestCase):
    """Test read records."""

    def setUp(self):
        self.admin = Account.objects.create_user(
            username='root', password='x', account_type=AccountType.ADMIN, nickname='Boss'
        )
        self.member = Account.objects.create_user(username='member', password='x')
        self.message = Message.objects.create(title='Hi', content='x', sender=self.admin, receiver=self.member)

    def test_list_requires_target(self):
        with self.assertRaises(ValidationServiceError):
            NotificationReadService(user=self.admin).page({'read_type': 'message'})

    def test_mark_read_is_idempotent(self):
        service = NotificationReadService(user=self.admin)

        first = service.mark_read({'read_type': 'message', 'target_id': self.message.pk})
        second = service.mark_read({'read_type': 'message', 'target_id': self.message.pk})

        self.assertTrue(first['created'])
        self.assertFalse(second['created'])
        self.assertEqual(first['id'], second['id'])
        self.assertEqual(NotificationRead.objects.count(), 1)

    def test_sender_reading_keeps_message_unread(self):
        NotificationReadService(user=self.admin).mark_read({'read_type': 'message', 'target_id': self.message.pk})

        self.message.refresh_from_db()
        self.assertEqual(self.message.status, Message.Status.UNREAD)

    def test_receiver_reading_flips_message(self):
        NotificationReadService(user=self.member).mark_read({'read_type': 'message', 'target_id': self.message.pk})

        self.message.refresh_from_db()
        self.assertEqual(self.message.status, Message.Status.READ)

    def test_list_includes_reader_names(self):
        announcement = Announcement.objects.create(title='News', content='x')
        NotificationReadService(user=self.admin).mark_read({'read_type': 'announcement', 'target_id': announcement.pk})
        NotificationReadService(user=self.member).mark_read({'read_type': 'announcement', 'target_id': announcement.pk})

        result = NotificationReadService(user=self.admin).page({
            'read_type': 'announcement',
            'target_id': announcement.pk,
            'account_id': self.admin.pk,
        })

        self.assertEqual(result['total'], 1)
        self.assertEqual(result['list'][0]['account_username'], 'root')
        self.assertEqual(result['list'][0]['account_nickname'], 'Boss')

    def test_mark_read_validation(self):
        service = NotificationReadService(user=self.admin)

        with self.assertRaises(ValidationServiceError):
            service.mark_read({'read_type': 'email', 'target_id': 1})
        with self.assertRaises(NotFoundServiceError):
            service.mark_read({'read_type': 'announcement', 'target_id': 9999})
        with self.assertRaises(PermissionServiceError):
            NotificationReadService().mark_read({'read_type': 'message', 'target_id': self.message.pk})
