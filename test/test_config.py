"""
Tests for Settings and LocalizationOptions
"""

import dataclasses

import pytest
from pydantic import ValidationError

from localizer.config import Settings
from localizer.exceptions import ConfigurationError, InvalidCultureError
from localizer.options import LocalizationOptions


class TestSettings:
    def test_defaults(self):
        fields = Settings.model_fields
        assert fields["culture_parameter_index"].default == 1
        assert fields["default_culture"].default == "en"
        assert fields["culture_cookie_name"].default == "culture"
        assert fields["set_culture_cookie"].default is False

    def test_default_ui_culture_follows_default_culture(self, make_settings):
        settings = make_settings(default_culture="ga")
        assert settings.default_ui_culture == "ga"

    def test_explicit_default_ui_culture(self, make_settings):
        settings = make_settings(default_culture="ga", default_ui_culture="en")
        assert settings.default_ui_culture == "en"

    def test_rejects_malformed_supported_culture(self, make_settings):
        with pytest.raises(ValidationError):
            make_settings(supported_cultures=["ga", "English"])

    def test_rejects_empty_supported_cultures(self, make_settings):
        with pytest.raises(ValidationError):
            make_settings(supported_cultures=[])

    def test_rejects_malformed_default_culture(self, make_settings):
        with pytest.raises(ValidationError):
            make_settings(default_culture="GA")

    def test_rejects_negative_culture_parameter_index(self, make_settings):
        with pytest.raises(ValidationError):
            make_settings(culture_parameter_index=-1)

    def test_rejects_uncompilable_excluded_route(self, make_settings):
        with pytest.raises(ValidationError) as exc_info:
            make_settings(excluded_routes=[r"^/api/", "("])
        assert "not a valid regular expression" in str(exc_info.value)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_CULTURE", "ga")
        monkeypatch.setenv("SUPPORTED_CULTURES", '["ga", "en"]')
        monkeypatch.setenv("CULTURE_PARAMETER_INDEX", "2")
        settings = Settings()
        assert settings.default_culture == "ga"
        assert settings.supported_cultures == ["ga", "en"]
        assert settings.culture_parameter_index == 2


class TestLocalizationOptions:
    def test_from_settings(self, make_settings):
        options = LocalizationOptions.from_settings(
            make_settings(default_ui_culture="en", set_culture_cookie=True, culture_parameter_index=2)
        )
        assert options.supported_culture_names == ["ga", "en"]
        assert options.default_culture.name == "ga"
        assert options.default_ui_culture.name == "en"
        assert options.culture_parameter_index == 2
        assert options.excluded_routes == (r"^/api/v1/i18n/cultures", r"^/health$")
        assert options.set_culture_cookie is True

    def test_supported_order_preserved(self):
        options = LocalizationOptions.create(supported_cultures=["en", "ga", "fr"], default_culture="en")
        assert options.supported_culture_names == ["en", "ga", "fr"]

    def test_frozen(self, options):
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.culture_parameter_index = 2

    def test_create_rejects_malformed_culture(self):
        with pytest.raises(InvalidCultureError):
            LocalizationOptions.create(supported_cultures=["ga", "IRISH"], default_culture="ga")

    def test_rejects_negative_index(self):
        with pytest.raises(ConfigurationError):
            LocalizationOptions.create(supported_cultures=["ga"], default_culture="ga", culture_parameter_index=-1)
