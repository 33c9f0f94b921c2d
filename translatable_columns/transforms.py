"""
Accessor/mutator для переводимых атрибутов.

    class Item(HasColumnTranslations, models.Model):
        translatable_keys = ["name"]

        @translation_accessor("name_en")
        def english_name(self, value):
            return value.upper()

        @translation_mutator("name")
        def clean_name(self, value, locale):
            setattr(self, f"name_{locale}", value.strip())

Ключ может быть локализованным (name_en) или логическим (name);
локализованный проверяется первым.
"""
from .resolver import TransformRegistry

ACCESSOR_ATTR = "_translation_accessor_for"
MUTATOR_ATTR = "_translation_mutator_for"


def translation_accessor(key: str):
    def decorator(func):
        setattr(func, ACCESSOR_ATTR, key)
        return func
    return decorator


def translation_mutator(key: str):
    def decorator(func):
        setattr(func, MUTATOR_ATTR, key)
        return func
    return decorator


def collect_transforms(cls):
    """{ключ: имя метода} для accessor и mutator, с учётом наследования."""
    accessors, mutators = {}, {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if not callable(attr):
                continue
            key = getattr(attr, ACCESSOR_ATTR, None)
            if key is not None:
                accessors[key] = name
            key = getattr(attr, MUTATOR_ATTR, None)
            if key is not None:
                mutators[key] = name
    return accessors, mutators


def bind_transforms(instance, accessors: dict, mutators: dict) -> TransformRegistry:
    return TransformRegistry(
        accessors={key: getattr(instance, name) for key, name in accessors.items()},
        mutators={key: getattr(instance, name) for key, name in mutators.items()},
    )
