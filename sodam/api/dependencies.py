"""
FastAPI dependencies and the service container

The container is built once by ``create_app``; every service passes through
the service logging interceptor while it is assembled.
"""
from dataclasses import dataclass
from typing import Optional

import redis
from fastapi import Depends, Request

from sodam.config import Settings
from sodam.core.logging import get_logger
from sodam.infrastructure.redis_client import create_cache_client, create_primary_client
from sodam.instrumentation.service_logging import ServiceLoggingInterceptor
from sodam.services.code_service import CodeService
from sodam.services.health_service import HealthService
from sodam.services.store_service import StorePolicyService

logger = get_logger(__name__)


@dataclass(frozen=True)
class Container:
    settings: Settings

    primary_client: redis.Redis
    cache_client: redis.Redis

    code_service: CodeService
    store_service: StorePolicyService
    health_service: HealthService

    def close(self) -> None:
        self.primary_client.close()
        self.cache_client.close()


def build_container(
    settings: Settings,
    *,
    interceptor: Optional[ServiceLoggingInterceptor] = None,
    primary_client: Optional[redis.Redis] = None,
    cache_client: Optional[redis.Redis] = None
) -> Container:
    """
    Assemble services for the given settings snapshot

    Args:
        settings: Settings bound at startup
        interceptor: Service logging interceptor (default namespace if None)
        primary_client: Primary redis client (created if None)
        cache_client: Cache redis client (created if None)
    """
    interceptor = interceptor or ServiceLoggingInterceptor()

    if primary_client is None:
        primary_client = create_primary_client(settings)
    if cache_client is None:
        cache_client = create_cache_client(settings)

    code_service = interceptor.instrument(CodeService())
    store_service = interceptor.instrument(StorePolicyService(settings))
    health_service = interceptor.instrument(
        HealthService(settings, primary_client, cache_client)
    )

    logger.info("Service container built", namespace=interceptor.namespace)

    return Container(
        settings=settings,
        primary_client=primary_client,
        cache_client=cache_client,
        code_service=code_service,
        store_service=store_service,
        health_service=health_service,
    )


def get_container(request: Request) -> Container:
    """Container attached to the running application"""
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    return container.settings


def get_code_service(container: Container = Depends(get_container)) -> CodeService:
    return container.code_service


def get_store_service(container: Container = Depends(get_container)) -> StorePolicyService:
    return container.store_service


def get_health_service(container: Container = Depends(get_container)) -> HealthService:
    return container.health_service
