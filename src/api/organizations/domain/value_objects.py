"""Value objects for the Organizations domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ulid import ULID


@dataclass(frozen=True)
class OrganizationId:
    """Identifier for an Organization.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> OrganizationId:
        """Generate a new OrganizationId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> OrganizationId:
        """Create OrganizationId from string value.

        Args:
            value: ULID string

        Returns:
            OrganizationId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid OrganizationId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class MembershipId:
    """Identifier for a Membership aggregate."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> MembershipId:
        """Generate a new MembershipId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> MembershipId:
        """Create MembershipId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid MembershipId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class UserId:
    """Identifier for a user account."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> UserId:
        """Generate a new UserId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> UserId:
        """Create UserId from string value.

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid UserId: {value}") from e

        return cls(value=value)


class MembershipRole(StrEnum):
    """Roles a member can hold within an organization.

    Roles form ordered tiers: USER < ADMIN < OWNER.
    """

    USER = "user"
    ADMIN = "admin"
    OWNER = "owner"


class MembershipStatus(StrEnum):
    """Lifecycle status of a membership.

    An invitation starts INVITED, becomes ACCEPTED when the user accepts
    it, and CONFIRMED once an administrator confirms the user. REVOKED
    memberships keep their row but grant no access.
    """

    REVOKED = "revoked"
    INVITED = "invited"
    ACCEPTED = "accepted"
    CONFIRMED = "confirmed"


class EventSystemUser(StrEnum):
    """Automated, non-human sources of membership changes."""

    SCIM = "scim"
    DOMAIN_VERIFICATION = "domain_verification"
    PUBLIC_API = "public_api"


class EventType(StrEnum):
    """Audit event types recorded for membership changes."""

    ORGANIZATION_USER_REMOVED = "OrganizationUser_Removed"
