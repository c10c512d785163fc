"""Membership aggregate for the Organizations context."""

from __future__ import annotations

from dataclasses import dataclass

from organizations.domain.value_objects import (
    MembershipId,
    MembershipRole,
    MembershipStatus,
    OrganizationId,
    UserId,
)


@dataclass
class Membership:
    """A user's association with one organization.

    A membership whose user_id is None is an invitation that has not been
    accepted yet; it is addressed only by its email.

    Business rules:
    - Every organization keeps at least one confirmed owner. Removal
      commands enforce this, since it spans several memberships.
    """

    id: MembershipId
    organization_id: OrganizationId
    role: MembershipRole
    status: MembershipStatus
    user_id: UserId | None = None
    email: str | None = None

    def belongs_to(self, organization_id: OrganizationId) -> bool:
        """Check if this membership is scoped to the given organization."""
        return self.organization_id == organization_id

    def is_held_by(self, user_id: UserId | None) -> bool:
        """Check if ``user_id`` is the user holding this membership."""
        return user_id is not None and self.user_id == user_id

    def is_owner(self) -> bool:
        """Check if this membership carries the owner role."""
        return self.role == MembershipRole.OWNER

    def is_confirmed(self) -> bool:
        """Check if this membership has been confirmed."""
        return self.status == MembershipStatus.CONFIRMED

    def is_confirmed_owner(self) -> bool:
        """Check if this membership is a confirmed owner."""
        return self.is_owner() and self.is_confirmed()
