"""Membership domain events for the Organizations context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional

from organizations.domain.actors import acting_user_id, system_user
from organizations.domain.value_objects import EventType

if TYPE_CHECKING:
    from organizations.domain.actors import Actor
    from organizations.domain.aggregates import Membership


@dataclass(frozen=True)
class MembershipRemoved:
    """Event raised when a membership is removed from an organization.

    At most one of acting_user_id and system_user is set. Both are None
    for unattributed internal removals.

    Attributes:
        membership_id: The ID of the removed membership
        organization_id: The organization the membership belonged to
        user_id: The user that held the membership (None for invitations)
        role: The role the membership carried
        occurred_at: When this event occurred (UTC)
        event_type: Audit event type
        acting_user_id: The user that initiated the removal
        system_user: The automated source that initiated the removal
    """

    membership_id: str
    organization_id: str
    user_id: Optional[str]
    role: str
    occurred_at: datetime
    event_type: EventType = EventType.ORGANIZATION_USER_REMOVED
    acting_user_id: Optional[str] = None
    system_user: Optional[str] = None

    @classmethod
    def from_membership(
        cls,
        membership: Membership,
        actor: Actor | None = None,
        occurred_at: datetime | None = None,
    ) -> MembershipRemoved:
        """Build the event for ``membership`` removed by ``actor``."""
        actor_user = acting_user_id(actor)
        source = system_user(actor)
        return cls(
            membership_id=membership.id.value,
            organization_id=membership.organization_id.value,
            user_id=membership.user_id.value if membership.user_id else None,
            role=membership.role.value,
            occurred_at=occurred_at or datetime.now(UTC),
            acting_user_id=actor_user.value if actor_user else None,
            system_user=source.value if source else None,
        )
