import pytest
from pydantic import ValidationError

from sodam.config import Settings, StoreProperties, load_settings
from sodam.core.exceptions import ConfigurationError


def write_settings_file(directory, body: str) -> None:
    (directory / "application.yml").write_text(body, encoding="utf-8")


def test_defaults_when_no_source_provides_the_keys(isolated_config):
    settings = load_settings()

    assert settings.get_store_default_radius() == 100
    assert settings.get_redis_cache_database() == 1


def test_values_from_settings_file(isolated_config):
    write_settings_file(isolated_config, "app:\n  store:\n    defaultRadius: 250\n  redis:\n    cacheDatabase: 3\n")

    settings = load_settings()

    assert settings.get_store_default_radius() == 250
    assert settings.get_redis_cache_database() == 3


def test_one_key_present_other_defaults(isolated_config):
    write_settings_file(isolated_config, "app:\n  redis:\n    cacheDatabase: 5\n")

    settings = load_settings()

    assert settings.get_store_default_radius() == 100
    assert settings.get_redis_cache_database() == 5


def test_environment_overrides_settings_file(isolated_config, monkeypatch):
    write_settings_file(isolated_config, "app:\n  store:\n    defaultRadius: 250\n")
    monkeypatch.setenv("APP__STORE__DEFAULT_RADIUS", "300")

    assert load_settings().get_store_default_radius() == 300


def test_explicit_overrides_win(isolated_config, monkeypatch):
    monkeypatch.setenv("APP__REDIS__CACHE_DATABASE", "4")

    settings = load_settings(app={"redis": {"cache_database": 7}})

    assert settings.get_redis_cache_database() == 7


@pytest.mark.parametrize("body", [
    "app:\n  store:\n    defaultRadius: wide\n",
    "app:\n  store:\n    defaultRadius: 12.5\n",
    "app:\n  store:\n    defaultRadius: true\n",
    "app:\n  redis:\n    cacheDatabase: '1.0'\n",
    "app:\n  redis:\n    cacheDatabase: [1]\n",
])
def test_non_integer_values_fail_startup(isolated_config, body):
    write_settings_file(isolated_config, body)

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert exc_info.value.details["errors"]
    assert "Invalid configuration" in exc_info.value.message


def test_non_integer_environment_value_fails(isolated_config, monkeypatch):
    monkeypatch.setenv("APP__REDIS__CACHE_DATABASE", "cache")

    with pytest.raises(ConfigurationError):
        load_settings()


@pytest.mark.parametrize("body", [
    "app:\n  store:\n    defaultRadius: 0\n",
    "app:\n  redis:\n    cacheDatabase: -1\n",
])
def test_out_of_range_values_fail(isolated_config, body):
    write_settings_file(isolated_config, body)

    with pytest.raises(ConfigurationError):
        load_settings()


def test_snapshot_is_read_only(isolated_config):
    settings = load_settings()

    with pytest.raises(ValidationError):
        settings.app_name = "other"
    with pytest.raises(ValidationError):
        settings.app.store.default_radius = 5


def test_store_properties_accept_integer_strings():
    assert StoreProperties(default_radius="150").default_radius == 150


def test_ambient_settings_defaults(isolated_config):
    settings = Settings()

    assert settings.app_name == "sodam"
    assert settings.redis_database == 0
    assert settings.redis_password is None


def test_log_level_is_normalised(isolated_config, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert load_settings().log_level == "DEBUG"


def test_unknown_log_level_fails_startup(isolated_config, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert exc_info.value.details["errors"][0]["field"] == "log_level"
