"""API v1 router aggregation.

Fixed paths (health, searchhandler) are included before the generic
resource routes so they are never taken for resource names.
"""

from fastapi import APIRouter

from restws.api.v1.endpoints import health, resources, search_handlers

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    search_handlers.router, prefix="/searchhandler", tags=["search-handlers"]
)
api_router.include_router(resources.router, tags=["resources"])
