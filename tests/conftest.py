import os
import time

import pytest
import redis
from fastapi.testclient import TestClient

from sodam.api.dependencies import build_container
from sodam.config import Settings
from sodam.main import create_app


class FakeRedis:
    """Stands in for redis.Redis in tests; no network"""

    def __init__(self, available: bool = True, delay: float = 0.0):
        self.available = available
        self.delay = delay
        self.closed = False
        self.pings = 0

    def ping(self) -> bool:
        self.pings += 1
        if self.delay:
            time.sleep(self.delay)
        if not self.available:
            raise redis.ConnectionError("connection refused")
        return True

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty working directory and no sodam-related env vars"""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith(("APP__", "REDIS_", "APP_NAME", "APP_VERSION", "LOG_LEVEL", "DEBUG")):
            monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def fake_redis_factory():
    return FakeRedis


@pytest.fixture
def settings(isolated_config) -> Settings:
    return Settings()


@pytest.fixture
def container(settings):
    return build_container(settings, primary_client=FakeRedis(), cache_client=FakeRedis())


@pytest.fixture
def client(settings, container):
    app = create_app(settings, container, configure_logging=False)
    with TestClient(app) as test_client:
        yield test_client
