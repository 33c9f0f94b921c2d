from django.apps import AppConfig


class TranslatableColumnsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "translatable_columns"
    verbose_name = "Translatable columns"
