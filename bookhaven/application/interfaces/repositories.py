"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bookhaven.application.dtos.catalog import (
        ItemSearchCriteria,
        SellItemResult,
        SellItemWrite,
    )
    from bookhaven.application.dtos.event import (
        EventCreate,
        EventRegistrationResult,
        EventResult,
        EventUpdate,
    )
    from bookhaven.application.dtos.reference import (
        AuthorResult,
        AuthorWrite,
        ItemTypeResult,
        ItemTypeWrite,
    )
    from bookhaven.application.dtos.subscriber import SubscriberResult


# Shared by author and item type repositories (enrichment and name search)
class INameLookupRepository(Protocol):
    """Protocol for reference collections looked up by id or by name."""

    async def get_names_by_ids(self, ids: set[int]) -> dict[int, str]:
        """Return {id: name} for the ids that exist; missing ids are absent."""

    async def find_ids_by_name(self, like_pattern: str) -> set[int]:
        """Return ids whose name matches the escaped, case-insensitive LIKE pattern."""


class IAuthorRepository(INameLookupRepository, Protocol):
    """Protocol for author repository (DIP)."""

    async def get_by_id(self, author_id: int) -> AuthorResult | None:
        """Return author by ID."""

    async def list_authors(self) -> list[AuthorResult]:
        """Return all authors ordered by id."""

    async def create_author(self, data: AuthorWrite) -> AuthorResult:
        """Create an author."""

    async def replace_author(self, author_id: int, data: AuthorWrite) -> AuthorResult | None:
        """Overwrite every mutable field; None if not found."""

    async def delete_author(self, author_id: int) -> bool:
        """Delete author; False if not found."""


class IItemTypeRepository(INameLookupRepository, Protocol):
    """Protocol for item type repository (DIP)."""

    async def get_by_id(self, item_type_id: int) -> ItemTypeResult | None:
        """Return item type by ID."""

    async def list_item_types(self) -> list[ItemTypeResult]:
        """Return all item types ordered by id."""

    async def create_item_type(self, data: ItemTypeWrite) -> ItemTypeResult:
        """Create an item type."""

    async def replace_item_type(
        self, item_type_id: int, data: ItemTypeWrite
    ) -> ItemTypeResult | None:
        """Overwrite every mutable field; None if not found."""

    async def delete_item_type(self, item_type_id: int) -> bool:
        """Delete item type; False if not found."""


class ISellItemRepository(Protocol):
    """Protocol for sell item repository (DIP)."""

    async def get_by_id(self, item_id: int) -> SellItemResult | None:
        """Return sell item by ID."""

    async def find_page(
        self, criteria: ItemSearchCriteria, skip: int, limit: int
    ) -> tuple[list[SellItemResult], int]:
        """Return (page slice ordered by id, total matching count before pagination)."""

    async def list_distinct_item_type_ids(self) -> list[int]:
        """Return distinct item_type_id values present on items, ascending."""

    async def create_sell_item(self, data: SellItemWrite) -> SellItemResult:
        """Create a sell item."""

    async def replace_sell_item(
        self, item_id: int, data: SellItemWrite
    ) -> SellItemResult | None:
        """Overwrite every mutable field; None if not found."""

    async def delete_sell_item(self, item_id: int) -> bool:
        """Delete sell item; False if not found."""


class IEventRepository(Protocol):
    """Protocol for event and registration repository (DIP)."""

    async def get_by_id(self, event_id: int) -> EventResult | None:
        """Return event by ID (fresh from the store, counters included)."""

    async def list_upcoming(
        self, now: datetime, event_type: str | None, skip: int, limit: int
    ) -> tuple[list[EventResult], int]:
        """Return (active events dated >= now ordered by date, total count)."""

    async def list_event_types(self) -> list[str]:
        """Return distinct event types of active events, ascending."""

    async def create_event(self, data: EventCreate) -> EventResult:
        """Create an active event with zero registrations."""

    async def update_event(self, event_id: int, data: EventUpdate) -> EventResult | None:
        """Apply non-None fields except capacity; None if not found."""

    async def set_capacity(self, event_id: int, capacity: int) -> bool:
        """Set capacity only if current_registrations <= capacity. True if applied."""

    async def cancel_event(self, event_id: int) -> bool:
        """Set is_active False; False if not found."""

    async def try_reserve_seat(self, event_id: int) -> bool:
        """Atomically increment current_registrations if active and below capacity."""

    async def release_seat(self, event_id: int) -> None:
        """Atomically decrement current_registrations, never below zero."""

    async def get_registration(
        self, event_id: int, email: str
    ) -> EventRegistrationResult | None:
        """Return the registration for (event, email)."""

    async def add_registration(
        self, event_id: int, email: str, name: str, registered_date: datetime
    ) -> EventRegistrationResult:
        """Insert a registration. Raises AlreadyRegisteredException on duplicate."""

    async def delete_registration(self, event_id: int, registration_id: int) -> bool:
        """Delete a registration of the event; False if no row was removed."""

    async def list_registrations(self, event_id: int) -> list[EventRegistrationResult]:
        """Return registrations of an event ordered by registered_date."""


class ISubscriberRepository(Protocol):
    """Protocol for subscriber repository (DIP)."""

    async def get_by_email(self, email: str) -> SubscriberResult | None:
        """Return subscriber by (normalized) email, active or not."""

    async def create_subscriber(
        self, email: str, name: str | None, subscribed_date: datetime
    ) -> SubscriberResult:
        """Insert an active subscriber. Raises AlreadySubscribedException on duplicate."""

    async def set_active(
        self,
        subscriber_id: int,
        is_active: bool,
        *,
        subscribed_date: datetime | None = None,
        name: str | None = None,
    ) -> SubscriberResult | None:
        """Flip is_active (and optionally refresh date/name); None if not found."""

    async def count_active(self) -> int:
        """Return number of active subscribers."""
