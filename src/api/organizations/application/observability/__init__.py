"""Domain-Oriented Observability for the Organizations application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from organizations.application.observability.remove_membership_service_probe import (
    DefaultRemoveMembershipServiceProbe,
    RemoveMembershipServiceProbe,
)

__all__ = [
    "RemoveMembershipServiceProbe",
    "DefaultRemoveMembershipServiceProbe",
]
