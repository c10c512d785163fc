"""Application-layer value objects for the Organizations bounded context.

Batch removals report one outcome per requested membership, in request
order, so a single rejected entry does not hide the others.
"""

from __future__ import annotations

from dataclasses import dataclass

from organizations.domain.value_objects import MembershipId


@dataclass(frozen=True)
class RemovalSucceeded:
    """The membership was deleted."""

    membership_id: MembershipId

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def error_message(self) -> str:
        return ""


@dataclass(frozen=True)
class RemovalFailed:
    """The membership was left in place.

    Attributes:
        membership_id: The requested membership
        reason: Why the removal was rejected
    """

    membership_id: MembershipId
    reason: str

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def error_message(self) -> str:
        return self.reason


RemovalOutcome = RemovalSucceeded | RemovalFailed
