from core.config import Settings, get_settings
from core.logger import format_exception_short


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.injector_config_path == "config/injector.properties"
    assert settings.injector_config_encoding == "utf-8"
    assert settings.injector_strict_types is True
    assert settings.log_level == "INFO"
    assert settings.log_file == ""


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INJECTOR_CONFIG_PATH", "/etc/app/mapping.properties")
    monkeypatch.setenv("INJECTOR_STRICT_TYPES", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.injector_config_path == "/etc/app/mapping.properties"
    assert settings.injector_strict_types is False
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_falls_back_to_info():
    assert Settings(_env_file=None, LOG_LEVEL="chatty").log_level == "INFO"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_format_exception_short():
    assert format_exception_short(ValueError("bad value")) == "ValueError: bad value"
    assert format_exception_short(KeyError()) == "KeyError"
