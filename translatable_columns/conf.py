from django.conf import settings
from django.utils.translation import get_language

from .resolver import FallbackConfig


def short_locale(code):
    """"en-us" -> "en". None остаётся None."""
    if code is None:
        return None
    return code.split("-")[0]


def get_active_locale() -> str:
    return short_locale(get_language() or "") or ""


def get_fallback_config() -> FallbackConfig:
    # читаем на каждый вызов, чтобы работал override_settings
    return FallbackConfig(
        package_locale=getattr(settings, "TRANSLATABLE_FALLBACK_LOCALE", None),
        app_locale=short_locale(getattr(settings, "LANGUAGE_CODE", None)),
    )
