from django.apps import AppConfig


class CodelinesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'codelines'
    verbose_name = 'Code lines'
