from django.apps import AppConfig


class MenusConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'admin_core.menus'
    label = 'menus'
    verbose_name = 'Menus'
