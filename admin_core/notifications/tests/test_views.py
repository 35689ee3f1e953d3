"""Tests for notification API endpoints."""

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from admin_core.accounts.models import Account, AccountType

from ..models import Announcement, Message


class NotificationViewTests(APITestCase):

    def setUp(self):
        self.admin = Account.objects.create_user(username='root', password='x', account_type=AccountType.ADMIN)
        self.member = Account.objects.create_user(username='member', password='x')
        self.client.force_authenticate(self.admin)

    def test_announcement_crud(self):
        response = self.client.post(
            reverse('notifications:announcement-list'),
            {'title': 'News', 'content': 'Body'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        announcement_id = response.data['id']

        response = self.client.put(
            reverse('notifications:announcement-detail', args=[announcement_id]),
            {'title': 'Updated'},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Announcement.objects.get(pk=announcement_id).title, 'Updated')

        response = self.client.get(reverse('notifications:announcement-list'))
        self.assertEqual(response.data['total'], 1)

        response = self.client.delete(reverse('notifications:announcement-detail', args=[announcement_id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Announcement.objects.exists())

    def test_members_can_read_inbox_and_mark_read(self):
        message = Message.objects.create(title='Hi', content='x', sender=self.admin, receiver=self.member)
        self.client.force_authenticate(self.member)

        response = self.client.get(reverse('notifications:message-inbox'))
        self.assertEqual(response.data['total'], 1)

        response = self.client.post(
            reverse('notifications:notification-read-list'),
            {'read_type': 'message', 'target_id': message.pk},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        message.refresh_from_db()
        self.assertEqual(message.status, Message.Status.READ)

        response = self.client.get(reverse('notifications:message-list'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_read_list_requires_target(self):
        response = self.client.get(reverse('notifications:notification-read-list'), {'read_type': 'message'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
