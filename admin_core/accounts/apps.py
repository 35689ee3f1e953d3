from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'admin_core.accounts'
    label = 'accounts'
    verbose_name = 'Accounts'
