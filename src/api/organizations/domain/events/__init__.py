"""Domain events for the Organizations bounded context.

Domain events capture facts about things that have happened in the domain.
They are immutable value objects carrying everything needed to describe
the occurrence, and are what the audit event service records.
"""

from organizations.domain.events.membership import MembershipRemoved

# Type alias for all domain events in the Organizations context
DomainEvent = MembershipRemoved

__all__ = [
    "MembershipRemoved",
    "DomainEvent",
]
