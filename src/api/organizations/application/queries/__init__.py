"""Read-side queries for the Organizations bounded context."""

from organizations.application.queries.has_confirmed_owners_except import (
    HasConfirmedOwnersExceptQuery,
)

__all__ = ["HasConfirmedOwnersExceptQuery"]
