"""Domain layer: value objects and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from bookhaven.domain.exceptions import (
    AlreadyRegisteredException,
    AlreadySubscribedException,
    BookHavenException,
    CapacityBelowRegistrationsException,
    ConflictException,
    EventAlreadyPassedException,
    EventCancelledException,
    EventFullException,
    ResourceNotFoundException,
    ValidationException,
)
from bookhaven.domain.value_objects import (
    UNKNOWN_NAME,
    PageRequest,
    SearchTerm,
    normalize_email,
)

__all__ = [
    "AlreadyRegisteredException",
    "AlreadySubscribedException",
    "BookHavenException",
    "CapacityBelowRegistrationsException",
    "ConflictException",
    "EventAlreadyPassedException",
    "EventCancelledException",
    "EventFullException",
    "ResourceNotFoundException",
    "ValidationException",
    "UNKNOWN_NAME",
    "PageRequest",
    "SearchTerm",
    "normalize_email",
]
