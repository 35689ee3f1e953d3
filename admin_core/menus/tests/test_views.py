"""Tests for menu API endpoints."""

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from admin_core.accounts.models import Account, AccountType, AdminProfile, Role
from admin_core.modules.models import Module

from ..models import Menu, RoleMenu


class MenuViewTests(APITestCase):

    def setUp(self):
        self.root = Account.objects.create_user(username='root', password='x', account_type=AccountType.ADMIN)
        AdminProfile.objects.create(account=self.root, is_super=True)
        self.client.force_authenticate(self.root)
        module = Module.objects.create(name='Blog', alias='blog', status=1, is_installed=True)
        self.menu = Menu.objects.create(menu_name='Posts', menu_key='posts', menu_path='/blog/posts', module=module)

    def test_user_menus(self):
        response = self.client.get(reverse('menus:menu-user-menus'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]['path'], '/blog')
        self.assertEqual(response.data[0]['routes'][0]['name'], 'posts')

    def test_user_accounts_may_read_their_navigation(self):
        member = Account.objects.create_user(username='member', password='x')
        self.client.force_authenticate(member)

        self.assertEqual(self.client.get(reverse('menus:menu-user-tree')).status_code, status.HTTP_200_OK)
        self.assertEqual(self.client.get(reverse('menus:menu-list')).status_code, status.HTTP_403_FORBIDDEN)

    def test_create_update_delete(self):
        response = self.client.post(reverse('menus:menu-list'), {'menu_name': 'Tags', 'menu_key': 'tags'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        menu_id = response.data['id']

        response = self.client.patch(reverse('menus:menu-detail', args=[menu_id]), {'sort': 3}, format='json')
        self.assertEqual(response.data['sort'], 3)

        response = self.client.delete(reverse('menus:menu-detail', args=[menu_id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Menu.objects.filter(pk=menu_id).exists())

    def test_role_menus(self):
        role = Role.objects.create(role_name='Editor', role_code='editor')

        response = self.client.post(
            reverse('menus:menu-role-menus'),
            {'role_id': role.pk, 'menu_ids': [self.menu.pk]},
            format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(RoleMenu.objects.filter(role=role, menu=self.menu).exists())

        response = self.client.get(reverse('menus:menu-role-menus'), {'role_id': role.pk, 'account_type': 'admin'})
        self.assertEqual(response.data['checked_menu_ids'], [self.menu.pk])

    def test_import_needs_super_admin(self):
        editor = Account.objects.create_user(username='editor', password='x', account_type=AccountType.ADMIN)
        self.client.force_authenticate(editor)

        response = self.client.post(reverse('menus:menu-import-menus'), {'module': 'Blog'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_import_rejects_path_like_names(self):
        response = self.client.post(reverse('menus:menu-import-menus'), {'module': '../etc'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
