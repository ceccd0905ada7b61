"""Unit tests for ParameterBinder."""

from __future__ import annotations

from togglekit.application.toggles import DEFAULT_SPLIT_SEPARATOR, ParameterBinder


class TestGetValue:
    def test_present(self) -> None:
        binder = ParameterBinder({"Browsers": "Chrome"})
        assert binder.get_value("Browsers") == "Chrome"

    def test_absent_returns_none(self) -> None:
        assert ParameterBinder({}).get_value("Browsers") is None

    def test_names_are_case_sensitive(self) -> None:
        assert ParameterBinder({"Browsers": "Chrome"}).get_value("browsers") is None

    def test_none_data_is_empty(self) -> None:
        assert ParameterBinder(None).get_value("Browsers") is None

    def test_binder_does_not_see_later_writes(self) -> None:
        raw = {"Browsers": "Chrome"}
        binder = ParameterBinder(raw)
        raw["Browsers"] = "Firefox"
        assert binder.get_value("Browsers") == "Chrome"


class TestGetListValue:
    def test_default_separator(self) -> None:
        assert DEFAULT_SPLIT_SEPARATOR == ";"
        binder = ParameterBinder({"Browsers": "Firefox;Chrome"})
        assert binder.get_list_value("Browsers") == ["Firefox", "Chrome"]

    def test_blank_segments_dropped_and_trimmed(self) -> None:
        binder = ParameterBinder({"Browsers": " Firefox ;; ;Chrome;"})
        assert binder.get_list_value("Browsers") == ["Firefox", "Chrome"]

    def test_order_preserved(self) -> None:
        binder = ParameterBinder({"Countries": "Spain;France;Italy"})
        assert binder.get_list_value("Countries") == ["Spain", "France", "Italy"]

    def test_absent_parameter_is_empty_list(self) -> None:
        assert ParameterBinder({}).get_list_value("Browsers") == []

    def test_empty_string_is_empty_list(self) -> None:
        assert ParameterBinder({"Browsers": ""}).get_list_value("Browsers") == []

    def test_explicit_separator_overrides_default(self) -> None:
        binder = ParameterBinder({"Browsers": "Firefox,Chrome"})
        assert binder.get_list_value("Browsers", ",") == ["Firefox", "Chrome"]

    def test_configured_separator(self) -> None:
        binder = ParameterBinder({"Browsers": "Firefox|Chrome"}, separator="|")
        assert binder.separator == "|"
        assert binder.get_list_value("Browsers") == ["Firefox", "Chrome"]
