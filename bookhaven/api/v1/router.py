"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from bookhaven.api.v1.dependencies.
"""

from fastapi import APIRouter

from bookhaven.api.v1.endpoints import (
    authors,
    events,
    health,
    item_types,
    items,
    subscribers,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(authors.router, prefix="/authors", tags=["authors"])
api_router.include_router(item_types.router, prefix="/item-types", tags=["item-types"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(subscribers.router, prefix="/subscribers", tags=["subscribers"])
