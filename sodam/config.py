"""
Application settings bound once at startup through Pydantic Settings

Sources, highest precedence first: explicit overrides, environment
variables (``APP__STORE__DEFAULT_RADIUS``), ``.env``, ``application.yml``.
"""
import re
from typing import Any, Optional, Tuple, Type

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from sodam.core.exceptions import ConfigurationError

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _require_integer(value: Any) -> Any:
    """Accept ints and integer strings only; no silent coercion of bools or floats"""
    if isinstance(value, bool):
        raise ValueError("expected an integer, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.match(value.strip()):
        return int(value.strip())
    raise ValueError(f"expected an integer, got {value!r}")


class StoreProperties(BaseModel):
    """Store settings (app.store)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_radius: int = Field(
        default=100,
        gt=0,
        validation_alias=AliasChoices("defaultRadius", "default_radius"),
        description="Default attendance check radius in meters",
    )

    check_radius = field_validator("default_radius", mode="before")(_require_integer)


class RedisProperties(BaseModel):
    """Redis settings (app.redis)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cache_database: int = Field(
        default=1,
        ge=0,
        validation_alias=AliasChoices("cacheDatabase", "cache_database"),
        description="Redis database index used for caching",
    )

    check_database = field_validator("cache_database", mode="before")(_require_integer)


class AppProperties(BaseModel):
    """The ``app`` section of the settings file"""
    model_config = ConfigDict(frozen=True)

    store: StoreProperties = Field(default_factory=StoreProperties)
    redis: RedisProperties = Field(default_factory=RedisProperties)


class Settings(BaseSettings):
    """Process-wide settings snapshot, read-only after construction"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        yaml_file="application.yml",
        yaml_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # application
    app_name: str = Field(default="sodam", description="application name")
    app_version: str = Field(default="1.0.0", description="application version")
    debug: bool = Field(default=False, description="console log output and reload")
    log_level: str = Field(default="INFO", description="logging level")

    # server
    host: str = Field(default="0.0.0.0", description="host to bind")
    port: int = Field(default=8080, ge=1, le=65535, description="port to bind")

    # redis connection
    redis_host: str = Field(default="localhost", description="redis host")
    redis_port: int = Field(default=6379, ge=1, le=65535, description="redis port")
    redis_database: int = Field(default=0, ge=0, description="primary redis database")
    redis_password: Optional[str] = Field(default=None, description="redis password")
    redis_timeout: float = Field(default=5.0, gt=0, description="redis command timeout in seconds")

    app: AppProperties = Field(default_factory=AppProperties)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def get_store_default_radius(self) -> int:
        """Default attendance radius in meters"""
        return self.app.store.default_radius

    def get_redis_cache_database(self) -> int:
        """Redis database index for the cache"""
        return self.app.redis.cache_database


def load_settings(**overrides: Any) -> Settings:
    """
    Bind settings from all sources

    Args:
        overrides: Values taking precedence over every other source

    Returns:
        Frozen settings snapshot

    Raises:
        ConfigurationError: A value is missing its expected type or range
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid configuration: {len(errors)} error(s)",
            details={"errors": errors}
        ) from e
