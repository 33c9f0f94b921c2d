import pytest
from django.utils import translation


@pytest.fixture(autouse=True)
def _reset_language():
    yield
    translation.deactivate()


@pytest.fixture
def locales(settings):
    """
    locales(app, package): активный язык и LANGUAGE_CODE = app,
    TRANSLATABLE_FALLBACK_LOCALE = package.
    """

    def _locales(app="en", package=None):
        settings.LANGUAGE_CODE = app
        settings.TRANSLATABLE_FALLBACK_LOCALE = package
        if app:
            translation.activate(app)
        else:
            translation.deactivate_all()

    _locales()
    return _locales


@pytest.fixture
def model(db, locales):
    from tests.factories import create

    return create()
