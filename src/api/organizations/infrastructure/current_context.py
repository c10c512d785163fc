"""Current context backed by the shared authorization provider.

Resolves the requesting user's organization roles and the organization's
managing provider from the relationship store.
"""

from __future__ import annotations

from organizations.domain.value_objects import OrganizationId, UserId
from shared_kernel.authorization.protocols import AuthorizationProvider
from shared_kernel.authorization.types import (
    Permission,
    RelationType,
    ResourceType,
    format_resource,
    format_subject,
)


class AuthorizationCurrentContext:
    """ICurrentContext for one authenticated user.

    Create one per request; the user is fixed for the lifetime of the
    context.
    """

    def __init__(self, authz: AuthorizationProvider, user_id: UserId):
        self._authz = authz
        self._user_id = user_id

    async def _check_organization_permission(
        self, organization_id: OrganizationId, permission: Permission
    ) -> bool:
        resource = format_resource(ResourceType.ORGANIZATION, organization_id.value)
        subject = format_subject(ResourceType.USER, self._user_id.value)
        return await self._authz.check_permission(
            resource=resource,
            permission=permission.value,
            subject=subject,
        )

    async def is_organization_owner(self, organization_id: OrganizationId) -> bool:
        """Check if the current user is an owner of the organization."""
        return await self._check_organization_permission(
            organization_id, Permission.OWN
        )

    async def is_organization_admin(self, organization_id: OrganizationId) -> bool:
        """Check if the current user is an admin (or owner) of the organization."""
        return await self._check_organization_permission(
            organization_id, Permission.ADMINISTRATE
        )

    async def provider_id_for_organization(
        self, organization_id: OrganizationId
    ) -> str | None:
        """Return the provider managing the organization, if any."""
        tuples = await self._authz.read_relationships(
            resource_type=ResourceType.ORGANIZATION.value,
            resource_id=organization_id.value,
            relation=RelationType.PROVIDER.value,
            subject_type=ResourceType.PROVIDER.value,
        )
        for rel_tuple in tuples:
            if rel_tuple.relation == RelationType.PROVIDER:
                return rel_tuple.subject_id
        return None
