"""Ports for the Organizations bounded context.

Ports define the interfaces the application layer depends on. Concrete
implementations live in the infrastructure layer or outside this service.
"""

from organizations.ports.exceptions import BadRequestError, NotFoundError
from organizations.ports.protocols import (
    ICurrentContext,
    IEventService,
    IHasConfirmedOwnersExceptQuery,
)
from organizations.ports.repositories import IMembershipRepository

__all__ = [
    "BadRequestError",
    "NotFoundError",
    "ICurrentContext",
    "IEventService",
    "IHasConfirmedOwnersExceptQuery",
    "IMembershipRepository",
]
