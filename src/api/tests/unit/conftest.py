"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, Mock

import pytest

from organizations.domain.aggregates import Membership
from organizations.domain.value_objects import (
    MembershipId,
    MembershipRole,
    MembershipStatus,
    OrganizationId,
    UserId,
)
from organizations.ports.protocols import (
    ICurrentContext,
    IEventService,
    IHasConfirmedOwnersExceptQuery,
)
from organizations.ports.repositories import IMembershipRepository


@pytest.fixture
def organization_id():
    """Organization the tests operate in."""
    return OrganizationId.generate()


@pytest.fixture
def make_membership(organization_id):
    """Factory for Membership aggregates in the test organization."""

    def _make(
        role: MembershipRole = MembershipRole.USER,
        status: MembershipStatus = MembershipStatus.CONFIRMED,
        organization: OrganizationId | None = None,
        user_id: UserId | None = None,
    ) -> Membership:
        return Membership(
            id=MembershipId.generate(),
            organization_id=organization or organization_id,
            role=role,
            status=status,
            user_id=user_id or UserId.generate(),
        )

    return _make


@pytest.fixture
def mock_membership_repo():
    """Mock IMembershipRepository with empty defaults."""
    repo = Mock(spec=IMembershipRepository)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_organization_and_user = AsyncMock(return_value=None)
    repo.get_many = AsyncMock(return_value=[])
    repo.get_many_by_organization_and_role = AsyncMock(return_value=[])
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_current_context():
    """Mock ICurrentContext for a user with no organization roles."""
    context = Mock(spec=ICurrentContext)
    context.is_organization_owner = AsyncMock(return_value=False)
    context.is_organization_admin = AsyncMock(return_value=False)
    context.provider_id_for_organization = AsyncMock(return_value=None)
    return context


@pytest.fixture
def mock_owners_query():
    """Mock IHasConfirmedOwnersExceptQuery reporting that owners remain."""
    query = Mock(spec=IHasConfirmedOwnersExceptQuery)
    query.has_confirmed_owners_except = AsyncMock(return_value=True)
    return query


@pytest.fixture
def mock_event_service():
    """Mock IEventService."""
    service = Mock(spec=IEventService)
    service.log_membership_event = AsyncMock()
    return service
