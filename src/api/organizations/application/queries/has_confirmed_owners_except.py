"""Confirmed-owner query for the Organizations bounded context."""

from __future__ import annotations

from typing import Iterable

from organizations.domain.value_objects import (
    MembershipId,
    MembershipRole,
    OrganizationId,
)
from organizations.ports.protocols import ICurrentContext
from organizations.ports.repositories import IMembershipRepository


class HasConfirmedOwnersExceptQuery:
    """Checks whether an organization keeps a confirmed owner.

    An organization managed by a provider counts as owned even when no
    confirmed owner membership remains, unless include_provider is False.
    """

    def __init__(
        self,
        membership_repository: IMembershipRepository,
        current_context: ICurrentContext,
    ):
        self._membership_repository = membership_repository
        self._current_context = current_context

    async def has_confirmed_owners_except(
        self,
        organization_id: OrganizationId,
        excluded_ids: Iterable[MembershipId],
        include_provider: bool = True,
    ) -> bool:
        """Check for a confirmed owner other than the excluded memberships.

        Args:
            organization_id: The organization to check
            excluded_ids: Memberships that do not count
            include_provider: Fall back to the managing provider when no
                other confirmed owner remains

        Returns:
            True if at least one owner would remain
        """
        excluded = set(excluded_ids)
        owners = await self._membership_repository.get_many_by_organization_and_role(
            organization_id, MembershipRole.OWNER
        )
        has_other_owner = any(
            owner.is_confirmed_owner() and owner.id not in excluded for owner in owners
        )

        if not has_other_owner and include_provider:
            provider_id = await self._current_context.provider_id_for_organization(
                organization_id
            )
            return provider_id is not None

        return has_other_owner
