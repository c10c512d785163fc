"""Unit tests for AuthorizationCurrentContext."""

from unittest.mock import AsyncMock, Mock

import pytest

from organizations.domain.value_objects import UserId
from organizations.infrastructure import AuthorizationCurrentContext
from shared_kernel.authorization.protocols import AuthorizationProvider
from shared_kernel.authorization.types import RelationshipTuple


@pytest.fixture
def user_id():
    return UserId.generate()


@pytest.fixture
def mock_authz():
    """Mock AuthorizationProvider."""
    authz = Mock(spec=AuthorizationProvider)
    authz.check_permission = AsyncMock(return_value=False)
    authz.read_relationships = AsyncMock(return_value=[])
    return authz


@pytest.fixture
def current_context(mock_authz, user_id):
    return AuthorizationCurrentContext(authz=mock_authz, user_id=user_id)


class TestOrganizationRoles:
    """Tests for owner and admin checks."""

    @pytest.mark.asyncio
    async def test_owner_check_uses_own_permission(
        self, current_context, mock_authz, organization_id, user_id
    ):
        mock_authz.check_permission = AsyncMock(return_value=True)

        assert await current_context.is_organization_owner(organization_id) is True
        mock_authz.check_permission.assert_awaited_once_with(
            resource=f"organization:{organization_id.value}",
            permission="own",
            subject=f"user:{user_id.value}",
        )

    @pytest.mark.asyncio
    async def test_admin_check_uses_administrate_permission(
        self, current_context, mock_authz, organization_id, user_id
    ):
        assert await current_context.is_organization_admin(organization_id) is False
        mock_authz.check_permission.assert_awaited_once_with(
            resource=f"organization:{organization_id.value}",
            permission="administrate",
            subject=f"user:{user_id.value}",
        )


class TestProviderLookup:
    """Tests for provider_id_for_organization."""

    @pytest.mark.asyncio
    async def test_returns_provider_id(
        self, current_context, mock_authz, organization_id
    ):
        mock_authz.read_relationships = AsyncMock(
            return_value=[
                RelationshipTuple(
                    resource=f"organization:{organization_id.value}",
                    relation="provider",
                    subject="provider:prov-1",
                )
            ]
        )

        assert (
            await current_context.provider_id_for_organization(organization_id)
            == "prov-1"
        )
        mock_authz.read_relationships.assert_awaited_once_with(
            resource_type="organization",
            resource_id=organization_id.value,
            relation="provider",
            subject_type="provider",
        )

    @pytest.mark.asyncio
    async def test_returns_none_without_provider(
        self, current_context, organization_id
    ):
        assert await current_context.provider_id_for_organization(organization_id) is None
