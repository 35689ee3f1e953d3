"""Tests for pulling module code from git or zip archives."""

import json
from unittest.mock import call, patch

import requests
from django.test import TestCase

from ..exceptions import GitNotFoundError, ModulePullError, ModuleValidationError
from ..models import Module
from ..puller import ModulePuller
from .utils import ModulesDirMixin, completed, fake_response, zip_bytes

MANIFEST = json.dumps({'name': 'Blog'})


class PullValidationTests(ModulesDirMixin, TestCase):

    def test_requires_type_and_url(self):
        with self.assertRaises(ModuleValidationError):
            ModulePuller().pull(Module(name='Blog', pull_type='git'))

    def test_rejects_unknown_type(self):
        with self.assertRaises(ModuleValidationError):
            ModulePuller().pull(Module(name='Blog', pull_type='ftp', pull_url='ftp://x'))


@patch('admin_core.modules.puller.requests.get')
class ZipPullTests(ModulesDirMixin, TestCase):
    """Test zip archive pulls."""

    def setUp(self):
        super().setUp()
        self.module = Module(name='Blog', pull_type=Module.PullType.URL, pull_url='https://example.com/blog.zip')

    def test_single_top_directory_is_unwrapped(self, mock_get):
        mock_get.return_value = fake_response(zip_bytes({
            'blog-main/module.json': MANIFEST,
            'blog-main/src/app.py': 'print(1)',
            'README.txt': 'stray',
        }))

        with self.assertLogs('admin_core.modules.puller', level='WARNING'):
            path = ModulePuller().pull(self.module)

        self.assertEqual(path, self.root / 'Blog')
        self.assertTrue((path / 'module.json').is_file())
        self.assertTrue((path / 'src' / 'app.py').is_file())
        self.assertFalse((path / 'README.txt').exists())
        mock_get.assert_called_once_with(
            'https://example.com/blog.zip', timeout=5, allow_redirects=True, stream=True
        )

    def test_flat_archive_keeps_relative_paths(self, mock_get):
        mock_get.return_value = fake_response(zip_bytes({
            'module.json': MANIFEST,
            'src/app.py': 'print(1)',
            'lib/util.py': '',
        }))

        path = ModulePuller().pull(self.module)

        self.assertTrue((path / 'src' / 'app.py').is_file())
        self.assertTrue((path / 'lib' / 'util.py').is_file())

    def test_replaces_existing_directory(self, mock_get):
        old = self.write_manifest('Blog', name='Blog')
        (old / 'obsolete.py').write_text('', encoding='utf-8')
        mock_get.return_value = fake_response(zip_bytes({'module.json': MANIFEST}))

        path = ModulePuller().pull(self.module)

        self.assertFalse((path / 'obsolete.py').exists())

    def test_temp_files_are_removed(self, mock_get):
        mock_get.return_value = fake_response(zip_bytes({'module.json': MANIFEST}))

        ModulePuller().pull(self.module)

        self.assertEqual(list(self.temp.iterdir()), [])

    def test_http_error(self, mock_get):
        mock_get.return_value = fake_response(status_code=404)

        with self.assertRaises(ModulePullError) as ctx:
            ModulePuller().pull(self.module)
        self.assertIn('404', str(ctx.exception))
        self.assertEqual(list(self.temp.iterdir()), [])

    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError('refused')

        with self.assertRaises(ModulePullError):
            ModulePuller().pull(self.module)

    def test_bad_zip(self, mock_get):
        mock_get.return_value = fake_response(b'not a zip')

        with self.assertRaises(ModulePullError):
            ModulePuller().pull(self.module)
        self.assertEqual(list(self.temp.iterdir()), [])

    def test_archive_without_manifest(self, mock_get):
        mock_get.return_value = fake_response(zip_bytes({'src/app.py': ''}))

        with self.assertRaises(ModulePullError) as ctx:
            ModulePuller().pull(self.module)
        self.assertIn('module.json', str(ctx.exception))


@patch('admin_core.modules.puller.run_git')
@patch('admin_core.modules.puller.find_git', return_value='git')
class GitPullTests(ModulesDirMixin, TestCase):
    """Test git submodule pulls."""

    def setUp(self):
        super().setUp()
        self.module = Module(name='Blog', pull_type=Module.PullType.GIT, pull_url='https://example.com/blog.git')
        self.path = self.root / 'Blog'

    def _checkout(self, *args, **kwargs):
        if args[1][:2] == ['submodule', 'add']:
            self.write_manifest('Blog', name='Blog')
            (self.path / '.git').write_text('gitdir: ../.git/modules/Blog', encoding='utf-8')
        return completed()

    def test_adds_submodule(self, mock_find, mock_run):
        mock_run.side_effect = self._checkout

        ModulePuller().pull(self.module)

        mock_run.assert_has_calls([
            call('git', ['submodule', 'add', '--name', 'Blog', '--', 'https://example.com/blog.git', str(self.path)]),
            call('git', ['submodule', 'update', '--init', '--recursive', '--', str(self.path)]),
        ])

    def test_add_failure_raises_with_output(self, mock_find, mock_run):
        mock_run.return_value = completed(128, 'fatal: repository not found')

        with self.assertRaises(ModulePullError) as ctx:
            ModulePuller().pull(self.module)
        self.assertIn('repository not found', str(ctx.exception))

    def test_incomplete_directory_is_cleared(self, mock_find, mock_run):
        self.path.mkdir()
        (self.path / 'partial.txt').write_text('', encoding='utf-8')
        mock_run.side_effect = self._checkout

        ModulePuller().pull(self.module)

        self.assertFalse((self.path / 'partial.txt').exists())

    def test_existing_checkout_pulls_with_branch_fallback(self, mock_find, mock_run):
        self.write_manifest('Blog', name='Blog')
        (self.path / '.git').write_text('gitdir: x', encoding='utf-8')
        mock_run.side_effect = [completed(1, 'no main'), completed()]

        ModulePuller().pull(self.module)

        mock_run.assert_has_calls([
            call('git', ['pull', 'origin', 'main'], cwd=self.path),
            call('git', ['pull', 'origin', 'master'], cwd=self.path),
        ])

    def test_failed_update_only_warns(self, mock_find, mock_run):
        self.write_manifest('Blog', name='Blog')
        (self.path / '.git').mkdir()
        mock_run.return_value = completed(1, 'offline')

        with self.assertLogs('admin_core.modules.puller', level='WARNING'):
            ModulePuller().pull(self.module)

    def test_git_missing(self, mock_find, mock_run):
        mock_find.side_effect = GitNotFoundError('git command not found')

        with self.assertRaises(GitNotFoundError):
            ModulePuller().pull(self.module)
        mock_run.assert_not_called()
