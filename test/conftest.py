"""
Pytest configuration and fixtures for localizer tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from localizer.config import Settings  # noqa: E402
from localizer.options import LocalizationOptions  # noqa: E402
from localizer.providers.base import RequestCultureContext  # noqa: E402


@pytest.fixture
def options() -> LocalizationOptions:
    """Irish/English site with an Irish default and the culture in the first path segment."""
    return LocalizationOptions.create(
        supported_cultures=["ga", "en", "en-IE"],
        default_culture="ga",
        culture_parameter_index=1,
        excluded_routes=[r"^/api/", r"^/health$"],
    )


@pytest.fixture
def make_context():
    def _make(path="/", accept_language="", culture_cookie=None, query_params=None):
        return RequestCultureContext(
            path=path,
            accept_language=accept_language,
            culture_cookie=culture_cookie,
            query_params=query_params or {},
        )

    return _make


@pytest.fixture
def make_settings():
    def _make(**overrides):
        values = {
            "supported_cultures": ["ga", "en"],
            "default_culture": "ga",
            "excluded_routes": [r"^/api/v1/i18n/cultures", r"^/health$"],
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def make_client(make_settings):
    from main import create_app

    def _make(providers=None, **overrides):
        app = create_app(make_settings(**overrides), providers=providers)
        return TestClient(app, follow_redirects=False)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
