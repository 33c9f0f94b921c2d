"""
Перевод атрибутов по колонкам: name -> name_ru / name_ky / name_en.

Модуль ничего не знает ни про Django, ни про текущий язык: всё нужное
(активная локаль, fallback-локали, куда слать уведомление) приходит в
TranslationContext, а значения читаются/пишутся в любой MutableMapping (bag).
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from .exceptions import AttributeNotTranslatable

logger = logging.getLogger(__name__)


@dataclass
class TranslatableSpec:
    keys: list = field(default_factory=list)
    locales: list = field(default_factory=list)


@dataclass(frozen=True)
class FallbackConfig:
    package_locale: str | None = None
    app_locale: str | None = None


@dataclass(frozen=True)
class TranslationContext:
    active_locale: str = ""
    fallback: FallbackConfig = field(default_factory=FallbackConfig)
    # (key, locale, old_value, new_value)
    on_set: Callable[[str, str, Any, Any], None] | None = None


@dataclass
class TransformRegistry:
    """
    accessors: ключ -> fn(value) -> value
    mutators:  ключ -> fn(value, locale), пишет в bag сам
    Ключом может быть и локализованный ключ (name_en), и логический (name).
    """
    accessors: dict = field(default_factory=dict)
    mutators: dict = field(default_factory=dict)

    def accessor_for(self, localized_key: str, key: str):
        if localized_key in self.accessors:
            return self.accessors[localized_key]
        return self.accessors.get(key)

    def mutators_for(self, localized_key: str, key: str) -> list:
        return [self.mutators[k] for k in (localized_key, key) if k in self.mutators]


_NO_TRANSFORMS = TransformRegistry()


def normalize_names(*names) -> list:
    """set_translatable_keys("a", "b") и set_translatable_keys(["a", "b"]) — одно и то же."""
    if len(names) == 1 and isinstance(names[0], (list, tuple)):
        return list(names[0])
    return list(names)


def is_empty(value) -> bool:
    # 0, False, "0" — это значения, пустыми считаются только None и ""
    return value is None or (isinstance(value, str) and value == "")


def is_translatable(key: str, spec: TranslatableSpec) -> bool:
    return key in spec.keys


def guard_translatable(key: str, spec: TranslatableSpec) -> None:
    if not is_translatable(key, spec):
        raise AttributeNotTranslatable.make(key, spec.keys)


def compose_key(key: str, locale: str) -> str:
    return f"{key}_{locale}"


def split_locale_suffix(raw_key: str):
    """name_en -> ("name", "en")"""
    return raw_key[:-3], raw_key[-2:]


def is_locale_suffixed_attribute(raw_key: str, spec: TranslatableSpec) -> bool:
    if len(raw_key) <= 3 or raw_key[-3] != "_":
        return False
    return is_translatable(split_locale_suffix(raw_key)[0], spec)


def translated_locales(key: str, spec: TranslatableSpec) -> list:
    # берётся из конфигурации модели, а не из того, что реально лежит в bag
    return list(spec.locales)


def resolve_locale(key: str, locale: str, spec: TranslatableSpec,
                   fallback: FallbackConfig, use_fallback: bool = True) -> str:
    if locale in translated_locales(key, spec):
        return locale

    if not use_fallback:
        return locale

    for candidate in (fallback.package_locale, fallback.app_locale):
        if candidate is not None:
            logger.debug("%s: locale %r is not configured, falling back to %r", key, locale, candidate)
            return candidate

    return locale


def _read(bag, localized_key: str):
    value = bag.get(localized_key)
    return "" if value is None else value


def get_translation(key: str, locale: str, spec: TranslatableSpec, bag,
                    context: TranslationContext, transforms: TransformRegistry | None = None,
                    use_fallback: bool = True):
    if transforms is None:
        transforms = _NO_TRANSFORMS

    locale = resolve_locale(key, locale, spec, context.fallback, use_fallback)
    localized_key = compose_key(key, locale)
    translation = _read(bag, localized_key)

    accessor = transforms.accessor_for(localized_key, key)
    if accessor is not None:
        return accessor(translation)

    if not use_fallback:
        return translation

    if not is_empty(translation):
        return translation

    # один шаг на активную локаль, без дальнейшего fallback
    return get_translation(key, context.active_locale, spec, bag, context, transforms, use_fallback=False)


def set_translation(key: str, locale: str, value, spec: TranslatableSpec, bag,
                    context: TranslationContext, transforms: TransformRegistry | None = None):
    """Возвращает (localized_key, итоговое значение)."""
    guard_translatable(key, spec)
    if transforms is None:
        transforms = _NO_TRANSFORMS

    localized_key = compose_key(key, locale)
    old_value = _read(bag, localized_key)

    for mutator in transforms.mutators_for(localized_key, key):
        mutator(value, locale)
        value = _read(bag, localized_key)

    bag[localized_key] = value
    logger.debug("%s: set %r", localized_key, value)

    if context.on_set is not None:
        context.on_set(key, locale, old_value, value)

    return localized_key, value


def set_translations(key: str, translations: Mapping, spec: TranslatableSpec, bag,
                     context: TranslationContext, transforms: TransformRegistry | None = None) -> list:
    guard_translatable(key, spec)
    return [
        set_translation(key, locale, value, spec, bag, context, transforms)
        for locale, value in translations.items()
    ]


def set_attribute(key: str, value, spec: TranslatableSpec, bag, context: TranslationContext,
                  transforms: TransformRegistry | None = None,
                  default: Callable[[str, Any], Any] | None = None) -> None:
    """
    Нетранслируемый ключ уходит в default (по умолчанию просто bag[key] = value).
    dict {locale: value} пишет все локали, скаляр — только активную.
    """
    if not is_translatable(key, spec):
        if default is None:
            bag[key] = value
        else:
            default(key, value)
        return

    if isinstance(value, Mapping):
        for locale, data in value.items():
            set_translation(key, locale, data, spec, bag, context, transforms)
        return

    set_translation(key, context.active_locale, value, spec, bag, context, transforms)


def get_attribute(key: str, spec: TranslatableSpec, bag, context: TranslationContext,
                  transforms: TransformRegistry | None = None,
                  default: Callable[[str], Any] | None = None):
    if is_locale_suffixed_attribute(key, spec):
        base, locale = split_locale_suffix(key)
        return get_translation(base, locale, spec, bag, context, transforms)

    if is_translatable(key, spec):
        return get_translation(key, context.active_locale, spec, bag, context, transforms)

    if default is None:
        return bag.get(key)
    return default(key)


def forget_translation(key: str, locale: str, bag) -> None:
    bag[compose_key(key, locale)] = None


def forget_all_translations(locale: str, spec: TranslatableSpec, bag) -> None:
    for key in spec.keys:
        forget_translation(key, locale, bag)


def get_translations(spec: TranslatableSpec, bag, context: TranslationContext,
                     transforms: TransformRegistry | None = None, key: str | None = None) -> dict:
    if key is None:
        return {
            attribute: get_translations(spec, bag, context, transforms, key=attribute)
            for attribute in spec.keys
        }

    guard_translatable(key, spec)

    result = {}
    for locale in translated_locales(key, spec):
        translation = get_translation(key, locale, spec, bag, context, transforms, use_fallback=False)
        if not is_empty(translation):
            result[locale] = translation
    return result


def has_translation(key: str, spec: TranslatableSpec, bag, context: TranslationContext,
                    transforms: TransformRegistry | None = None, locale: str | None = None) -> bool:
    locale = locale or context.active_locale
    return locale in get_translations(spec, bag, context, transforms, key=key)
