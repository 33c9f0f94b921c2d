from .exceptions import AttributeNotTranslatable
from .mixins import HasColumnTranslations, TranslatedAttribute
from .transforms import translation_accessor, translation_mutator

__all__ = (
    "AttributeNotTranslatable",
    "HasColumnTranslations",
    "TranslatedAttribute",
    "translation_accessor",
    "translation_mutator",
)
