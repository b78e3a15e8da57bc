from chartcanvas.config import Settings, get_settings, reset_settings


def test_defaults():
    settings = Settings()
    assert settings.fetch_timeout is None
    assert settings.default_number_format == "#,##0"
    assert settings.default_histogram_title == "Data"
    assert settings.curve_tension == 0.3


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com")
    monkeypatch.setenv("ENVIRONMENT", "production")
    settings = Settings()
    assert settings.fetch_timeout == 2.5
    assert settings.origins == ["https://a.example.com", "https://b.example.com"]
    assert not settings.is_development_mode()


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("FETCH_TIMEOUT", "1")
    reset_settings()
    assert get_settings() is not first
    assert get_settings().fetch_timeout == 1.0


def test_summary():
    summary = Settings(environment="development").get_summary()
    assert summary["development_mode"] is True
    assert summary["default_number_format"] == "#,##0"


def test_settings_config_and_source_hosts(monkeypatch):
    assert Settings.model_config["env_file"] == ".env"
    assert Settings.model_config["extra"] == "ignore"
    assert Settings().source_hosts == []

    monkeypatch.setenv("ALLOWED_SOURCE_HOSTS", " Data.Example.com ,cdn.example.com,")
    assert Settings().source_hosts == ["data.example.com", "cdn.example.com"]
