"""Unit tests for config settings & validation."""

import pytest

from togglekit.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    ToggleSettings,
)


# ---------------------------------------------------------------------------
# ToggleSettings defaults and validation
# ---------------------------------------------------------------------------


class TestToggleSettings:
    def test_defaults(self) -> None:
        settings = ToggleSettings()
        assert settings.list_separator == ";"
        assert settings.location_base_url == ""
        assert settings.location_timeout_seconds == 5.0
        assert settings.feature_cache_ttl_seconds == 0.0
        assert settings.trust_forwarded_for is False
        assert settings.caching_enabled is False

    def test_is_settings(self) -> None:
        assert isinstance(ToggleSettings(), Settings)

    def test_env_key(self) -> None:
        assert ToggleSettings.env_key("list_separator") == "TOGGLES_LIST_SEPARATOR"

    @pytest.mark.parametrize("separator", ["", ";;", " "])
    def test_rejects_bad_separator(self, separator: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ToggleSettings(list_separator=separator)
        assert exc_info.value.setting_name == "list_separator"

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ToggleSettings(location_timeout_seconds=0)

    def test_rejects_negative_ttl(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ToggleSettings(feature_cache_ttl_seconds=-1)

    def test_caching_enabled_with_positive_ttl(self) -> None:
        assert ToggleSettings(feature_cache_ttl_seconds=10).caching_enabled is True


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_from_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOGGLES_LOCATION_BASE_URL", "http://geo.test")
        settings = EnvSettingsLoader().load(ToggleSettings)
        assert settings.location_base_url == "http://geo.test"

    def test_loads_from_mapping(self) -> None:
        settings = EnvSettingsLoader(
            {
                "TOGGLES_LIST_SEPARATOR": "|",
                "TOGGLES_LOCATION_TIMEOUT_SECONDS": "2.5",
                "TOGGLES_FEATURE_CACHE_TTL_SECONDS": "30",
            }
        ).load(ToggleSettings)
        assert settings.list_separator == "|"
        assert settings.location_timeout_seconds == 2.5
        assert settings.feature_cache_ttl_seconds == 30.0

    def test_loads_bool_true(self) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            settings = EnvSettingsLoader({"TOGGLES_TRUST_FORWARDED_FOR": truthy}).load(ToggleSettings)
            assert settings.trust_forwarded_for is True

    def test_loads_bool_false(self) -> None:
        for falsy in ("false", "0", "no", "off"):
            settings = EnvSettingsLoader({"TOGGLES_TRUST_FORWARDED_FOR": falsy}).load(ToggleSettings)
            assert settings.trust_forwarded_for is False

    def test_unset_variables_keep_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(ToggleSettings) == ToggleSettings()

    def test_unparseable_number(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"TOGGLES_LOCATION_TIMEOUT_SECONDS": "soon"}).load(ToggleSettings)
        assert exc_info.value.setting_name == "TOGGLES_LOCATION_TIMEOUT_SECONDS"

    def test_validation_error_surfaces_as_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"TOGGLES_LIST_SEPARATOR": "::"}).load(ToggleSettings)

    def test_missing_required_setting(self) -> None:
        import dataclasses
        from typing import ClassVar

        @dataclasses.dataclass
        class GeoSettings(Settings):
            _prefix: ClassVar[str] = "GEO"
            api_key: str

        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(GeoSettings)
        assert exc_info.value.setting_name == "GEO_API_KEY"


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_invalid_value_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ToggleSettings(location_timeout_seconds=-2)
        err = exc_info.value
        assert err.code == "invalid_setting_value"
        assert err.detail == {
            "setting": "location_timeout_seconds",
            "value": "-2",
            "reason": "must be positive",
        }
        assert err.message == "Setting 'location_timeout_seconds' must be positive (got -2)"

    def test_unparseable_value_reason(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"TOGGLES_FEATURE_CACHE_TTL_SECONDS": "later"}).load(ToggleSettings)
        assert exc_info.value.reason.startswith("could not be parsed")
        assert exc_info.value.value == "later"

    def test_missing_setting_detail(self) -> None:
        err = MissingRequiredSettingError("TOGGLES_LOCATION_BASE_URL")
        assert err.code == "missing_required_setting"
        assert err.detail == {"setting": "TOGGLES_LOCATION_BASE_URL"}
        assert "TOGGLES_LOCATION_BASE_URL" in err.message
