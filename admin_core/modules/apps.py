from django.apps import AppConfig


class ModulesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'admin_core.modules'
    label = 'modules'
    verbose_name = 'Modules'
