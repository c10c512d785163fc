"""Repository protocols (ports) for the Organizations bounded context.

Repository protocols define the interface for retrieving and deleting
Membership aggregates. Removal commands only read and delete; they never
create memberships or change their role or status.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from organizations.domain.aggregates import Membership
from organizations.domain.value_objects import (
    MembershipId,
    MembershipRole,
    OrganizationId,
    UserId,
)


@runtime_checkable
class IMembershipRepository(Protocol):
    """Repository for Membership aggregate persistence."""

    async def get_by_id(self, membership_id: MembershipId) -> Membership | None:
        """Retrieve a membership by its ID.

        Args:
            membership_id: The unique identifier of the membership

        Returns:
            The Membership aggregate, or None if not found
        """
        ...

    async def get_by_organization_and_user(
        self, organization_id: OrganizationId, user_id: UserId
    ) -> Membership | None:
        """Retrieve the membership a user holds in an organization.

        Args:
            organization_id: The organization to look in
            user_id: The user holding the membership

        Returns:
            The Membership aggregate, or None if the user is not a member
        """
        ...

    async def get_many(
        self, membership_ids: Iterable[MembershipId]
    ) -> list[Membership]:
        """Retrieve memberships by ID in a single lookup.

        IDs that do not exist are silently skipped. The result may include
        memberships of any organization; callers filter by scope.

        Args:
            membership_ids: IDs to look up

        Returns:
            The memberships found, in no particular order
        """
        ...

    async def get_many_by_organization_and_role(
        self, organization_id: OrganizationId, role: MembershipRole
    ) -> list[Membership]:
        """List every membership of an organization holding ``role``.

        Args:
            organization_id: The organization to list
            role: The exact role to match

        Returns:
            Matching memberships, regardless of status
        """
        ...

    async def delete(self, membership: Membership) -> None:
        """Delete a membership.

        Atomicity of the delete is the repository's responsibility.

        Args:
            membership: The Membership aggregate to delete
        """
        ...
