from collections.abc import MutableMapping

from . import conf, resolver
from .resolver import TranslatableSpec, TranslationContext
from .signals import translation_has_been_set
from .transforms import bind_transforms, collect_transforms


class InstanceAttributes(MutableMapping):
    """bag поверх атрибутов инстанса: name_en <-> instance.name_en"""

    def __init__(self, instance):
        self.instance = instance

    def __getitem__(self, key):
        try:
            return getattr(self.instance, key)
        except AttributeError:
            raise KeyError(key) from None

    def __setitem__(self, key, value):
        setattr(self.instance, key, value)

    def __delitem__(self, key):
        try:
            delattr(self.instance, key)
        except AttributeError:
            raise KeyError(key) from None

    def __iter__(self):
        return (f.attname for f in self.instance._meta.concrete_fields)

    def __len__(self):
        return len(self.instance._meta.concrete_fields)


class TranslatedAttribute:
    """
    obj.name -> перевод для активного языка, obj.name = "..." -> запись в name_<lang>.
    Ставится автоматически для каждого ключа из translatable_keys.
    """

    def __init__(self, key=None):
        self.key = key

    def __set_name__(self, owner, name):
        if self.key is None:
            self.key = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.get_attribute(self.key)

    def __set__(self, instance, value):
        instance.set_attribute(self.key, value)


class HasColumnTranslations:
    """
    Миксин для моделей, где перевод хранится в отдельных колонках:

        class Category(HasColumnTranslations, models.Model):
            translatable_keys = ["name"]
            translatable_locales = ["ru", "ky", "en"]

            name_ru = models.CharField(max_length=200)
            name_ky = models.CharField(max_length=200, blank=True, default="")
            name_en = models.CharField(max_length=200, blank=True, default="")
    """

    translatable_keys = []
    translatable_locales = []

    _translation_accessors = {}
    _translation_mutators = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for key in cls.translatable_keys:
            if not hasattr(cls, key):
                setattr(cls, key, TranslatedAttribute(key))
        cls._translation_accessors, cls._translation_mutators = collect_transforms(cls)

    def __init__(self, *args, **kwargs):
        # Item(name={"ru": ..., "en": ...}) / Item.objects.create(name="...")
        translated = {
            key: kwargs.pop(key)
            for key in list(kwargs)
            if key in type(self).translatable_keys
        }
        super().__init__(*args, **kwargs)
        for key, value in translated.items():
            self.set_attribute(key, value)

    # ---------- configuration

    def get_translatable_attributes(self) -> list:
        keys = self.translatable_keys
        return list(keys) if isinstance(keys, (list, tuple)) else []

    def get_translated_locales(self, key: str) -> list:
        return resolver.translated_locales(key, self.get_translation_spec())

    def set_translatable_keys(self, *keys):
        self.translatable_keys = resolver.normalize_names(*keys)
        return self

    def set_translatable_locales(self, *locales):
        self.translatable_locales = resolver.normalize_names(*locales)
        return self

    def get_translation_spec(self) -> TranslatableSpec:
        locales = self.translatable_locales
        return TranslatableSpec(
            keys=self.get_translatable_attributes(),
            locales=list(locales) if isinstance(locales, (list, tuple)) else [],
        )

    def get_translation_context(self) -> TranslationContext:
        return TranslationContext(
            active_locale=conf.get_active_locale(),
            fallback=conf.get_fallback_config(),
            on_set=self._send_translation_has_been_set,
        )

    def get_translation_transforms(self):
        return bind_transforms(self, self._translation_accessors, self._translation_mutators)

    def _translation_args(self):
        return (
            self.get_translation_spec(),
            InstanceAttributes(self),
            self.get_translation_context(),
            self.get_translation_transforms(),
        )

    def _send_translation_has_been_set(self, key, locale, old_value, new_value):
        translation_has_been_set.send(
            sender=self.__class__,
            instance=self,
            key=key,
            locale=locale,
            old_value=old_value,
            new_value=new_value,
        )

    # ---------- attribute access

    def is_translatable_attribute(self, key: str) -> bool:
        return resolver.is_translatable(key, self.get_translation_spec())

    def is_translatable_locale_attribute(self, key: str) -> bool:
        return resolver.is_locale_suffixed_attribute(key, self.get_translation_spec())

    def get_localized_key(self, key: str, locale: str) -> str:
        return resolver.compose_key(key, locale)

    def get_attribute(self, key: str):
        spec, bag, context, transforms = self._translation_args()
        return resolver.get_attribute(key, spec, bag, context, transforms, default=self._get_plain_attribute)

    def set_attribute(self, key: str, value):
        spec, bag, context, transforms = self._translation_args()
        resolver.set_attribute(key, value, spec, bag, context, transforms, default=self._set_plain_attribute)
        return self

    def _get_plain_attribute(self, key):
        if isinstance(getattr(type(self), key, None), TranslatedAttribute):
            try:
                return self.__dict__[key]
            except KeyError:
                raise AttributeError(
                    f"'{type(self).__name__}' object has no attribute '{key}'"
                ) from None
        return getattr(self, key)

    def _set_plain_attribute(self, key, value):
        if isinstance(getattr(type(self), key, None), TranslatedAttribute):
            self.__dict__[key] = value
        else:
            setattr(self, key, value)

    # ---------- translations

    def get_translation(self, key: str, locale: str, use_fallback: bool = True):
        spec, bag, context, transforms = self._translation_args()
        return resolver.get_translation(key, locale, spec, bag, context, transforms, use_fallback=use_fallback)

    def translate(self, key: str, locale: str = "", use_fallback: bool = True):
        return self.get_translation(key, locale, use_fallback)

    def get_translation_with_fallback(self, key: str, locale: str):
        return self.get_translation(key, locale, True)

    def get_translation_without_fallback(self, key: str, locale: str):
        return self.get_translation(key, locale, False)

    def set_translation(self, key: str, locale: str, value):
        spec, bag, context, transforms = self._translation_args()
        resolver.set_translation(key, locale, value, spec, bag, context, transforms)
        return self

    def set_translations(self, key: str, translations):
        spec, bag, context, transforms = self._translation_args()
        resolver.set_translations(key, translations, spec, bag, context, transforms)
        return self

    def forget_translation(self, key: str, locale: str):
        resolver.forget_translation(key, locale, InstanceAttributes(self))
        return self

    def forget_all_translations(self, locale: str):
        resolver.forget_all_translations(locale, self.get_translation_spec(), InstanceAttributes(self))
        return self

    def get_translations(self, key: str | None = None) -> dict:
        spec, bag, context, transforms = self._translation_args()
        return resolver.get_translations(spec, bag, context, transforms, key=key)

    def has_translation(self, key: str, locale: str | None = None) -> bool:
        spec, bag, context, transforms = self._translation_args()
        return resolver.has_translation(key, spec, bag, context, transforms, locale=locale)

    @property
    def translations(self) -> dict:
        return self.get_translations()
