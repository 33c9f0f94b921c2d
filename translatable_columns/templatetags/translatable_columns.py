from django import template

from translatable_columns import conf
from translatable_columns.mixins import HasColumnTranslations

register = template.Library()


@register.simple_tag
def t(obj, base_field: str, locale: str | None = None):
    """
    Использование: {% t obj "name" %} или {% t obj "name" "en" %}
    Для моделей с HasColumnTranslations — get_translation с fallback,
    для остальных берём name_<lang>, потом колонку языка по умолчанию.
    """
    lang = locale or conf.get_active_locale()

    if isinstance(obj, HasColumnTranslations) and obj.is_translatable_attribute(base_field):
        return obj.get_translation(base_field, lang)

    default_lang = conf.get_fallback_config().app_locale
    for code in (lang, default_lang):
        field = f"{base_field}_{code}"
        if code and hasattr(obj, field):
            val = getattr(obj, field) or ""
            if val:
                return val

    # fallback если нет *_<lang> полей
    return getattr(obj, base_field, "") or ""


@register.filter
def translations(obj, base_field: str):
    """{% for lang, value in item|translations:"name" %}"""
    if not isinstance(obj, HasColumnTranslations) or not obj.is_translatable_attribute(base_field):
        return {}
    return obj.get_translations(base_field)
