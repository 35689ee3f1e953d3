"""
Management command to import module menus from CSV.

Usage:
    python manage.py import_menus
    python manage.py import_menus --module=Blog --account-type=admin
"""

from django.core.management.base import BaseCommand, CommandError

from admin_core.accounts.models import AccountType
from admin_core.menus.importer import MENU_CSV, MenuImportService
from admin_core.modules.manifest import module_dir


class Command(BaseCommand):
    help = 'Import menus from Modules/*/data/menu.csv'

    def add_arguments(self, parser):
        parser.add_argument(
            '--module',
            type=str,
            help='Only import this module'
        )
        parser.add_argument(
            '--account-type',
            type=str,
            default=AccountType.ADMIN,
            choices=AccountType.values,
            help='Account type the menus belong to'
        )

    def handle(self, *args, **options):
        service = MenuImportService(account_type=options['account_type'])
        module_name = options.get('module')

        if module_name:
            result = service.import_menus_from_csv(module_name, module_dir(module_name) / MENU_CSV)
            if not result['success']:
                raise CommandError(result['message'])
            self.stdout.write(self.style.SUCCESS(result['message']))
        else:
            result = service.import_all_modules_menus()
            if not result['success']:
                raise CommandError(result['message'])

            failed = 0
            for item in result['modules']:
                if item['success']:
                    self.stdout.write(f"  - {item['module']}: {item['count']} menu(s)")
                else:
                    failed += 1
                    self.stderr.write(self.style.ERROR(f"  - {item['module']}: {item['message']}"))
            self.stdout.write(f"Imported {len(result['modules']) - failed} module(s), failed: {failed}")

        for warning in service.warnings:
            self.stdout.write(self.style.WARNING(warning))
