"""
Management command to sync module manifests into the module table.

Usage:
    python manage.py sync_modules
    python manage.py sync_modules --path=Blog
"""

from django.core.management.base import BaseCommand, CommandError

from admin_core.modules.scanner import scan_and_update_modules


class Command(BaseCommand):
    help = 'Scan Modules/*/module.json and update the module table'

    def add_arguments(self, parser):
        parser.add_argument(
            '--path',
            type=str,
            help='Only sync this module directory (absolute or relative to Modules/)'
        )

    def handle(self, *args, **options):
        result = scan_and_update_modules(options.get('path'))

        if result['success']:
            self.stdout.write(self.style.SUCCESS(f"Synced {len(result['success'])} module(s):"))
            for item in result['success']:
                self.stdout.write(f"  - {item['module_name']} ({item['path']})")
        else:
            self.stdout.write('No modules found to sync')

        for item in result['failed']:
            self.stderr.write(self.style.ERROR(f"  - {item['path']}: {item['message']}"))

        self.stdout.write(
            f"Success: {len(result['success'])}, failed: {len(result['failed'])}"
        )

        if result['failed']:
            raise CommandError(f"{len(result['failed'])} module(s) failed to sync")
