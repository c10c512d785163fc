"""Collaborator protocols (ports) for the Organizations bounded context.

These define what the application services need from the request's
authorization context, from the confirmed-owner query and from the audit
event sink, without committing to an implementation.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from organizations.domain.actors import Actor
from organizations.domain.aggregates import Membership
from organizations.domain.value_objects import (
    EventType,
    MembershipId,
    OrganizationId,
)


@runtime_checkable
class ICurrentContext(Protocol):
    """Authorization facts about the user behind the current request."""

    async def is_organization_owner(self, organization_id: OrganizationId) -> bool:
        """Check if the current user is an owner of the organization."""
        ...

    async def is_organization_admin(self, organization_id: OrganizationId) -> bool:
        """Check if the current user is an admin (or owner) of the organization."""
        ...

    async def provider_id_for_organization(
        self, organization_id: OrganizationId
    ) -> str | None:
        """Return the provider managing the organization, if any."""
        ...


@runtime_checkable
class IHasConfirmedOwnersExceptQuery(Protocol):
    """Answers whether an organization keeps a confirmed owner after a removal."""

    async def has_confirmed_owners_except(
        self,
        organization_id: OrganizationId,
        excluded_ids: Iterable[MembershipId],
        include_provider: bool = True,
    ) -> bool:
        """Check for a confirmed owner other than the excluded memberships.

        Args:
            organization_id: The organization to check
            excluded_ids: Memberships that do not count (those being removed)
            include_provider: Count a managing provider as an owner when no
                other confirmed owner remains

        Returns:
            True if at least one owner would remain
        """
        ...


@runtime_checkable
class IEventService(Protocol):
    """Audit event sink for membership changes."""

    async def log_membership_event(
        self,
        membership: Membership,
        event_type: EventType,
        actor: Actor | None = None,
    ) -> None:
        """Record an audit event for ``membership``.

        Args:
            membership: The membership the event is about
            event_type: The kind of change
            actor: Who caused the change; None for unattributed internal calls
        """
        ...
