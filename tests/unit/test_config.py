"""Test Settings defaults, TOML loading, and validation."""

import pytest

from course_domain.core.config import ObservabilityConfig, Settings, load_settings
from course_domain.core.errors import ConfigError


class TestSettingsDefaults:
    def test_default_settings(self):
        settings = Settings()
        assert settings.roles == ["ADMIN", "SYSTEM"]
        assert settings.strict_timestamps is True

    def test_default_observability(self):
        settings = Settings()
        assert settings.observability.log_level == "INFO"
        assert settings.observability.log_format == "console"

    def test_rejects_unknown_log_format(self):
        with pytest.raises(ValueError):
            ObservabilityConfig(log_format="xml")


class TestLoadSettings:
    def test_no_path_gives_defaults(self):
        settings = load_settings()
        assert settings.roles == ["ADMIN", "SYSTEM"]

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(config_path=tmp_path / "absent.toml")
        assert settings.strict_timestamps is True

    def test_load_from_toml(self, tmp_path):
        path = tmp_path / "course.toml"
        path.write_text(
            'roles = ["ADMIN", "EDITOR"]\n'
            "strict_timestamps = false\n"
            "\n"
            "[observability]\n"
            'log_level = "DEBUG"\n'
            'log_format = "json"\n'
        )
        settings = load_settings(config_path=path)
        assert settings.roles == ["ADMIN", "EDITOR"]
        assert settings.strict_timestamps is False
        assert settings.observability.log_level == "DEBUG"
        assert settings.observability.log_format == "json"

    def test_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "course.toml"
        path.write_text('roles = ["ADMIN"]\n')
        settings = load_settings(config_path=path, overrides={"roles": ["SYSTEM"]})
        assert settings.roles == ["SYSTEM"]

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("COURSE_STRICT_TIMESTAMPS", "false")
        assert load_settings().strict_timestamps is False

    def test_nested_env_var(self, monkeypatch):
        monkeypatch.setenv("COURSE_OBSERVABILITY__LOG_LEVEL", "WARNING")
        assert load_settings().observability.log_level == "WARNING"


class TestInvalidSettings:
    def test_blank_role(self):
        with pytest.raises(ConfigError, match="invalid settings"):
            load_settings(overrides={"roles": ["ADMIN", "  "]})

    def test_bad_log_format_in_file(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('[observability]\nlog_format = "xml"\n')
        with pytest.raises(ConfigError) as excinfo:
            load_settings(config_path=path)
        assert excinfo.value.context == {"config_path": str(path)}
        assert excinfo.value.__cause__ is not None

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("roles = [\n")
        with pytest.raises(ConfigError, match="^invalid config file") as excinfo:
            load_settings(config_path=path)
        assert excinfo.value.context == {"config_path": str(path)}
        assert excinfo.value.__cause__ is not None
