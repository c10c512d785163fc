"""Authorization provider protocol.

Defines the interface for authorization providers, allowing for swappable
implementations (relationship store client, mock, alternative providers).
"""

from __future__ import annotations

from typing import Protocol

from shared_kernel.authorization.types import RelationshipTuple


class AuthorizationProvider(Protocol):
    """Protocol for authorization providers.

    Bounded contexts only read from the provider; relationship writes
    are owned by whatever process provisions memberships.
    """

    async def check_permission(
        self,
        resource: str,
        permission: str,
        subject: str,
    ) -> bool:
        """Check if a subject has permission on a resource.

        Args:
            resource: Resource identifier (e.g., "organization:abc123")
            permission: Permission to check (e.g., "own", "administrate")
            subject: Subject identifier (e.g., "user:alice")

        Returns:
            True if permission is granted, False otherwise

        Raises:
            AuthorizationError: If the check fails
        """
        ...

    async def read_relationships(
        self,
        resource_type: str,
        resource_id: str | None = None,
        relation: str | None = None,
        subject_type: str | None = None,
        subject_id: str | None = None,
    ) -> list[RelationshipTuple]:
        """Read relationships matching the given filter.

        Args:
            resource_type: Resource type to read (required)
            resource_id: Optional resource identifier filter
            relation: Optional relation filter
            subject_type: Optional subject type filter
            subject_id: Optional subject identifier filter

        Returns:
            Matching relationship tuples

        Raises:
            AuthorizationError: If the read fails
        """
        ...
