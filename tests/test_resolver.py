import pytest

from translatable_columns import resolver
from translatable_columns.exceptions import AttributeNotTranslatable
from translatable_columns.resolver import (
    FallbackConfig,
    TransformRegistry,
    TranslatableSpec,
    TranslationContext,
)


@pytest.fixture
def spec():
    return TranslatableSpec(keys=["name", "description"], locales=["en", "ru", "uk"])


@pytest.fixture
def bag():
    return {"name_en": "Name", "name_ru": "Имя", "description_en": "Text"}


def context(active="en", package=None, app=None, on_set=None):
    return TranslationContext(
        active_locale=active,
        fallback=FallbackConfig(package_locale=package, app_locale=app),
        on_set=on_set,
    )


def test_compose_key():
    assert resolver.compose_key("name", "en") == "name_en"
    assert resolver.compose_key("name", "") == "name_"


def test_is_locale_suffixed_attribute(spec):
    assert resolver.is_locale_suffixed_attribute("name_en", spec)
    assert resolver.is_locale_suffixed_attribute("description_de", spec)
    assert not resolver.is_locale_suffixed_attribute("name", spec)
    assert not resolver.is_locale_suffixed_attribute("title_en", spec)
    assert not resolver.is_locale_suffixed_attribute("nameen", spec)
    assert resolver.split_locale_suffix("name_en") == ("name", "en")


def test_normalize_names():
    assert resolver.normalize_names("a", "b") == ["a", "b"]
    assert resolver.normalize_names(["a", "b"]) == ["a", "b"]
    assert resolver.normalize_names(("a",)) == ["a"]
    assert resolver.normalize_names() == []


def test_resolve_locale_keeps_configured_locale(spec):
    fallback = FallbackConfig("ru", "en")
    assert resolver.resolve_locale("name", "uk", spec, fallback) == "uk"


def test_resolve_locale_prefers_package_then_app_fallback(spec):
    assert resolver.resolve_locale("name", "de", spec, FallbackConfig("ru", "en")) == "ru"
    assert resolver.resolve_locale("name", "de", spec, FallbackConfig(None, "en")) == "en"
    assert resolver.resolve_locale("name", "de", spec, FallbackConfig(None, None)) == "de"
    assert resolver.resolve_locale("name", "de", spec, FallbackConfig("ru", "en"), use_fallback=False) == "de"


def test_resolve_locale_is_configuration_driven(spec, bag):
    # name_de лежит в bag, но de нет в locales -> всё равно fallback
    bag["name_de"] = "Name auf Deutsch"
    ctx = context(package="ru")

    assert resolver.get_translation("name", "de", spec, bag, ctx) == "Имя"


@pytest.mark.parametrize("value", ["", "0", 0, False, True, "text", 0.0])
def test_set_then_get_without_fallback_returns_value_unchanged(spec, value):
    bag = {}
    resolver.set_translation("name", "ru", value, spec, bag, context())

    result = resolver.get_translation("name", "ru", spec, bag, context(), use_fallback=False)

    assert result == value
    assert type(result) is type(value)


def test_none_reads_back_as_empty_string(spec):
    bag = {}
    resolver.set_translation("name", "ru", None, spec, bag, context())

    assert bag["name_ru"] is None
    assert resolver.get_translation("name", "ru", spec, bag, context(), use_fallback=False) == ""


@pytest.mark.parametrize("value", ["0", 0, False, 0.0])
def test_falsy_values_do_not_trigger_fallback(spec, bag, value):
    bag["name_ru"] = value

    assert resolver.get_translation("name", "ru", spec, bag, context()) is value


def test_fallback_chain(spec):
    bag = {"name_en": "en", "name_ru": "ru"}

    assert resolver.get_translation("name", "de", spec, bag, context(package="ru", app="en")) == "ru"
    assert resolver.get_translation("name", "de", spec, bag, context(package="uk", app="en")) == "en"
    assert resolver.get_translation("name", "de", spec, bag, context(active="ru", app="uk")) == "ru"
    assert resolver.get_translation("name", "de", spec, bag, context(active="uk", app="uk")) == ""


def test_second_fallback_is_not_recursive(spec):
    # активная локаль сама пустая -> "" без дальнейших попыток
    bag = {"name_en": "en"}

    assert resolver.get_translation("name", "ru", spec, bag, context(active="uk", package="en")) == ""


def test_accessor_precedence_and_no_fallback_after_accessor(spec):
    bag = {"name_en": "en", "name_ru": ""}
    transforms = TransformRegistry(accessors={
        "name": lambda value: f"global {value}",
        "name_en": lambda value: f"local {value}",
    })

    assert resolver.get_translation("name", "en", spec, bag, context(), transforms) == "local en"
    assert resolver.get_translation("name", "ru", spec, bag, context(), transforms) == "global "


def test_set_translation_guards_key(spec):
    with pytest.raises(AttributeNotTranslatable) as excinfo:
        resolver.set_translation("title", "en", "x", spec, {}, context())

    assert excinfo.value.translatable_keys == ["name", "description"]


def test_set_translation_returns_key_and_final_value(spec, bag):
    calls = []
    ctx = context(on_set=lambda *args: calls.append(args))

    assert resolver.set_translation("name", "ru", "Новое", spec, bag, ctx) == ("name_ru", "Новое")
    assert calls == [("name", "ru", "Имя", "Новое")]


def test_mutators_run_localized_first_then_logical(spec):
    bag = {}
    order = []

    def localized(value, locale):
        order.append(("name_en", value))
        bag["name_en"] = value.upper()

    def logical(value, locale):
        order.append(("name", value))
        bag[f"name_{locale}"] = f"{value}!"

    transforms = TransformRegistry(mutators={"name_en": localized, "name": logical})
    resolver.set_translation("name", "en", "hi", spec, bag, context(), transforms)

    assert order == [("name_en", "hi"), ("name", "HI")]
    assert bag["name_en"] == "HI!"


def test_mutator_that_writes_elsewhere_leaves_empty_value(spec):
    bag = {}

    def elsewhere(value, locale):
        bag["name_uk"] = value

    transforms = TransformRegistry(mutators={"name": elsewhere})
    assert resolver.set_translation("name", "en", "x", spec, bag, context(), transforms) == ("name_en", "")
    assert bag == {"name_uk": "x", "name_en": ""}


def test_set_attribute_dispatch(spec, bag):
    calls = []
    ctx = context(active="uk", on_set=lambda *args: calls.append(args))

    resolver.set_attribute("name", {"en": "A", "ru": "B"}, spec, bag, ctx)
    resolver.set_attribute("description", "scalar", spec, bag, ctx)
    resolver.set_attribute("slug", "plain", spec, bag, ctx)

    assert [c[:2] for c in calls] == [("name", "en"), ("name", "ru"), ("description", "uk")]
    assert bag["description_uk"] == "scalar"
    assert bag["slug"] == "plain"


def test_set_attribute_uses_default_for_untranslatable(spec, bag):
    passed = []
    resolver.set_attribute("slug", "x", spec, bag, context(), default=lambda k, v: passed.append((k, v)))

    assert passed == [("slug", "x")]
    assert "slug" not in bag


def test_get_attribute_dispatch(spec, bag):
    bag["slug"] = "plain"
    ctx = context(active="ru", app="en")

    assert resolver.get_attribute("name", spec, bag, ctx) == "Имя"
    assert resolver.get_attribute("name_en", spec, bag, ctx) == "Name"
    assert resolver.get_attribute("description_de", spec, bag, ctx) == "Text"
    assert resolver.get_attribute("description_ru", spec, bag, ctx) == ""
    assert resolver.get_attribute("slug", spec, bag, ctx) == "plain"
    assert resolver.get_attribute("slug", spec, bag, ctx, default=lambda k: k.upper()) == "SLUG"


def test_forget(spec, bag):
    resolver.forget_translation("name", "en", bag)
    assert bag["name_en"] is None
    assert resolver.get_translations(spec, bag, context(), key="name") == {"ru": "Имя"}

    resolver.forget_all_translations("ru", spec, bag)
    assert resolver.get_translations(spec, bag, context()) == {"name": {}, "description": {"en": "Text"}}


def test_get_translations_follows_configured_order(spec):
    bag = {"name_uk": "uk", "name_en": "en", "name_ru": ""}

    assert list(resolver.get_translations(spec, bag, context(), key="name")) == ["en", "uk"]
    assert list(resolver.get_translations(spec, bag, context())) == ["name", "description"]


def test_has_translation(spec, bag):
    assert resolver.has_translation("name", spec, bag, context(active="en"))
    assert resolver.has_translation("name", spec, bag, context(), locale="ru")
    assert not resolver.has_translation("name", spec, bag, context(active="uk"))
    assert not resolver.has_translation("description", spec, bag, context(), locale="ru")
