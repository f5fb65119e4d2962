"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for application services. Services are built
from infrastructure implementations here; routes depend only on these.
Reads use get_db; writes use get_db_transactional.
"""

from bookhaven.api.v1.dependencies.catalog import (
    get_author_service,
    get_author_service_for_write,
    get_catalog_query_service,
    get_item_type_service,
    get_item_type_service_for_write,
    get_sell_item_service,
)
from bookhaven.api.v1.dependencies.events import (
    get_event_service,
    get_event_service_for_write,
    get_subscription_service,
    get_subscription_service_for_write,
)

__all__ = [
    "get_author_service",
    "get_author_service_for_write",
    "get_catalog_query_service",
    "get_event_service",
    "get_event_service_for_write",
    "get_item_type_service",
    "get_item_type_service_for_write",
    "get_sell_item_service",
    "get_subscription_service",
    "get_subscription_service_for_write",
]
