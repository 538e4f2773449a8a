"""Tests for the PropTypes set, its factory and settings."""

import pytest

from nitpick import (
    ErrorCode,
    LogLevel,
    MissingRequiredProperty,
    PropLogger,
    PropTypes,
    ValidationResult,
    create_prop_types,
    get_prop_types,
)
from nitpick.config import Settings
from nitpick.validators.errors import FatalPropError, PropTypesError


class TestGeneralChecks:
    @pytest.mark.parametrize("value", ["", 0, False, [], {"a": 1}])
    def test_required_accepts_any_present_value(self, prop_types, sink, element, value):
        assert prop_types.is_required(value, "prop", element) == ValidationResult(result=True, value=value)
        assert sink.calls == []

    def test_required_missing_logs_then_raises(self, prop_types, sink, element):
        with pytest.raises(MissingRequiredProperty) as exc_info:
            prop_types.is_required(None, "title", element)

        method, event, fields = sink.calls[0]
        assert (method, event) == ("error", ErrorCode.PROP_REQUIRED_MISSING.value)
        assert fields["prop"] == "title"
        assert fields["element"] is element
        assert exc_info.value.result == ValidationResult(result=False, value=None)

    def test_missing_required_is_fatal(self):
        assert issubclass(MissingRequiredProperty, FatalPropError)
        assert issubclass(FatalPropError, PropTypesError)

    def test_optional_missing_is_only_informational(self, prop_types, sink, element):
        assert prop_types.is_optional(None, "subtitle", element) == ValidationResult(result=True, value=None)
        assert sink.calls[0][:2] == ("info", ErrorCode.PROP_OPTIONAL_MISSING.value)

    def test_optional_missing_is_quiet_below_verbose(self, prop_types, sink, element):
        prop_types.logger.set_level(LogLevel.WARNINGS)
        assert prop_types.is_optional(None, "subtitle", element).result is True
        assert sink.calls == []

    def test_optional_present_value(self, prop_types, sink, element):
        assert prop_types.is_optional("x", "subtitle", element) == ValidationResult(result=True, value="x")
        assert sink.calls == []

    def test_check_required(self, prop_types, element):
        assert prop_types.check_required(None, "title", element).result is False
        assert prop_types.check_required("t", "title", element).result is True


class TestScenarios:
    def test_boolean_string(self, prop_types, element):
        assert prop_types.is_boolean.is_required("true", "enabled", element) == ValidationResult(
            result=True, value=True
        )

    def test_missing_optional_number(self, prop_types, sink, element):
        assert prop_types.is_number.is_optional(None, "count", element) == ValidationResult(
            result=True, value=None
        )
        assert "error" not in [method for method, _, _ in sink.calls]

    def test_json_config(self, prop_types, element):
        assert prop_types.is_object.is_required('{"a":1}', "config", element) == ValidationResult(
            result=True, value={"a": 1}
        )

    def test_missing_label_raises(self, prop_types, element):
        with pytest.raises(MissingRequiredProperty):
            prop_types.is_string.is_required(None, "label", element)


class TestFactory:
    def test_version_comes_from_settings(self, prop_types):
        assert prop_types.version == "2.3.1"

    def test_explicit_version_wins(self, logger, settings):
        assert create_prop_types(package_version="0.9.0", logger=logger, settings=settings).version == "0.9.0"

    def test_version_is_read_only(self, prop_types):
        with pytest.raises(AttributeError):
            prop_types.version = "3.0.0"

    def test_testing_env_forces_silent(self, logger, settings):
        prop_types = create_prop_types(is_testing_env=True, logger=logger, settings=settings)
        assert prop_types.logger.level == LogLevel.SILENT

    def test_testing_setting_forces_silent(self, sink):
        settings = Settings(TESTING=True)
        prop_types = create_prop_types(logger=PropLogger(sink=sink), settings=settings)
        assert prop_types.logger.level == LogLevel.SILENT

    def test_explicit_flag_overrides_testing_setting(self, logger):
        settings = Settings(TESTING=True)
        prop_types = create_prop_types(is_testing_env=False, logger=logger, settings=settings)
        assert prop_types.logger.level == LogLevel.VERBOSE

    def test_builds_logger_from_settings(self):
        settings = Settings(LOG_LEVEL=1, LOG_PREFIX="@acme/widgets")
        prop_types = create_prop_types(settings=settings)
        assert prop_types.logger.level == 1
        assert prop_types.logger.prefix == "@acme/widgets"

    def test_validators_share_the_logger(self, prop_types):
        assert all(v.logger is prop_types.logger for v in prop_types.validators)
        assert [v.name for v in prop_types.validators] == [
            "StringValidator",
            "BooleanValidator",
            "NumberValidator",
            "ObjectValidator",
        ]

    def test_get_prop_types_is_cached(self):
        assert isinstance(get_prop_types(), PropTypes)
        assert get_prop_types() is get_prop_types()


class TestSettings:
    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("NITPICK_LOG_LEVEL", "1")
        monkeypatch.setenv("NITPICK_TESTING", "true")
        monkeypatch.setenv("NITPICK_PACKAGE_VERSION", "4.5.6")
        settings = Settings()
        assert settings.LOG_LEVEL == 1
        assert settings.TESTING is True
        assert settings.PACKAGE_VERSION == "4.5.6"

    def test_defaults(self, monkeypatch):
        for name in ("NITPICK_LOG_LEVEL", "NITPICK_TESTING", "NITPICK_PACKAGE_VERSION"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.LOG_LEVEL == LogLevel.VERBOSE
        assert settings.TESTING is False
        assert settings.LOG_PREFIX == "@reduct/component"


def test_diagnostics_reach_structlog(captured, element):
    prop_types = create_prop_types(settings=Settings(LOG_LEVEL=3))
    prop_types.is_number.is_optional("lots", "count", element)
    with pytest.raises(MissingRequiredProperty):
        prop_types.is_required(None, "title", element)

    assert [(entry["event"], entry["log_level"]) for entry in captured] == [
        ("prop_not_number", "warning"),
        ("prop_required_missing", "error"),
    ]
    assert captured[1]["element"] is element


def test_recoverable_check_is_shared(prop_types):
    from nitpick.validators.base import RecoverableRequiredMixin

    assert isinstance(prop_types, RecoverableRequiredMixin)
    assert all(isinstance(v, RecoverableRequiredMixin) for v in prop_types.validators)
