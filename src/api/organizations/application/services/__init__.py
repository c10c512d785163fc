"""Application services for the Organizations bounded context.

Application services orchestrate domain operations and enforce
business rules that span more than one aggregate.
"""

from organizations.application.services.remove_membership_service import (
    RemoveMembershipService,
)

__all__ = ["RemoveMembershipService"]
