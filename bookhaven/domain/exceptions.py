"""Domain exceptions for the BookHaven application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class BookHavenException(Exception):
    """Base exception for all BookHaven application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error code, message and details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(BookHavenException):
    """Raised when input validation fails (e.g. missing or blank field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(BookHavenException):
    """Raised when a requested resource is not found."""

    def __init__(
        self, resource_type: str, resource_id: int | str, message: str | None = None
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'item', 'event').
            resource_id: The id (or email) that was not found.
            message: Optional user-facing message; a generic one is built otherwise.
        """
        super().__init__(
            message or f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(BookHavenException):
    """Raised when a request violates a business rule on current state."""

    def __init__(
        self,
        message: str,
        error_code: str = "CONFLICT",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class EventCancelledException(ConflictException):
    """Raised when registering for an event that has been cancelled."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            "This event has been cancelled.",
            "EVENT_CANCELLED",
            {"event_id": event_id},
        )


class EventAlreadyPassedException(ConflictException):
    """Raised when registering for an event whose date is in the past."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            "This event has already passed.",
            "EVENT_PASSED",
            {"event_id": event_id},
        )


class AlreadyRegisteredException(ConflictException):
    """Raised when (event, email) is already registered."""

    def __init__(self, event_id: int, email: str) -> None:
        super().__init__(
            "You are already registered for this event.",
            "ALREADY_REGISTERED",
            {"event_id": event_id, "email": email},
        )


class EventFullException(ConflictException):
    """Raised when no seat is left (current_registrations reached capacity)."""

    def __init__(self, event_id: int, capacity: int) -> None:
        super().__init__(
            "This event is at full capacity.",
            "EVENT_FULL",
            {"event_id": event_id, "capacity": capacity},
        )


class CapacityBelowRegistrationsException(ConflictException):
    """Raised when an update would set capacity below current registrations."""

    def __init__(self, event_id: int, capacity: int, current_registrations: int) -> None:
        super().__init__(
            f"Capacity cannot be lower than current registrations ({current_registrations}).",
            "CAPACITY_BELOW_REGISTRATIONS",
            {
                "event_id": event_id,
                "capacity": capacity,
                "current_registrations": current_registrations,
            },
        )


class AlreadySubscribedException(ConflictException):
    """Raised when subscribing an email that already has an active subscription."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "This email is already subscribed.",
            "ALREADY_SUBSCRIBED",
            {"email": email},
        )
