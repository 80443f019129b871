"""
API v1 router
Collects all handlers
"""
from fastapi import APIRouter

from sodam.api.v1.handlers import code_handler, health_handler, store_handler

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(code_handler.router)
api_router.include_router(store_handler.router)
api_router.include_router(health_handler.router)
