"""Wiring for the Organizations bounded context.

Builds application services from the collaborators a request handler
already holds: the membership repository, the authorization provider and
the authenticated user. Logging is configured on first use unless the
hosting application has configured structlog already.
"""

from __future__ import annotations

import structlog

from infrastructure.logging import configure_logging
from organizations.application.observability import (
    DefaultRemoveMembershipServiceProbe,
    RemoveMembershipServiceProbe,
)
from organizations.application.queries import HasConfirmedOwnersExceptQuery
from organizations.application.services import RemoveMembershipService
from organizations.domain.value_objects import UserId
from organizations.infrastructure import AuditEventService, AuthorizationCurrentContext
from organizations.ports.repositories import IMembershipRepository
from shared_kernel.authorization.protocols import AuthorizationProvider
from shared_kernel.observability_context import ObservationContext


def get_remove_membership_service_probe(
    context: ObservationContext | None = None,
) -> RemoveMembershipServiceProbe:
    """Get RemoveMembershipServiceProbe instance.

    Args:
        context: Optional request metadata to bind to every probe event

    Returns:
        DefaultRemoveMembershipServiceProbe instance for observability
    """
    if not structlog.is_configured():
        configure_logging()

    probe = DefaultRemoveMembershipServiceProbe()
    if context is not None:
        return probe.with_context(context)
    return probe


def get_remove_membership_service(
    membership_repository: IMembershipRepository,
    authz: AuthorizationProvider,
    user_id: UserId,
    context: ObservationContext | None = None,
) -> RemoveMembershipService:
    """Get RemoveMembershipService for one authenticated user.

    Args:
        membership_repository: Repository for membership lookup and deletion
        authz: Authorization provider backing the current context
        user_id: The authenticated user making the request
        context: Optional request metadata for observability

    Returns:
        RemoveMembershipService instance
    """
    current_context = AuthorizationCurrentContext(authz=authz, user_id=user_id)
    return RemoveMembershipService(
        membership_repository=membership_repository,
        current_context=current_context,
        has_confirmed_owners_except_query=HasConfirmedOwnersExceptQuery(
            membership_repository=membership_repository,
            current_context=current_context,
        ),
        event_service=AuditEventService(),
        probe=get_remove_membership_service_probe(context),
    )
