"""Unit tests for HasConfirmedOwnersExceptQuery."""

from unittest.mock import AsyncMock

import pytest

from organizations.application.queries import HasConfirmedOwnersExceptQuery
from organizations.domain.value_objects import MembershipRole, MembershipStatus


@pytest.fixture
def query(mock_membership_repo, mock_current_context):
    """Create HasConfirmedOwnersExceptQuery with mocked dependencies."""
    return HasConfirmedOwnersExceptQuery(
        membership_repository=mock_membership_repo,
        current_context=mock_current_context,
    )


class TestHasConfirmedOwnersExcept:
    """Tests for HasConfirmedOwnersExceptQuery.has_confirmed_owners_except()."""

    @pytest.mark.asyncio
    async def test_true_when_other_confirmed_owner_exists(
        self, query, organization_id, make_membership, mock_membership_repo
    ):
        """Another confirmed owner keeps the organization owned."""
        leaving = make_membership(role=MembershipRole.OWNER)
        staying = make_membership(role=MembershipRole.OWNER)
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[leaving, staying]
        )

        result = await query.has_confirmed_owners_except(organization_id, [leaving.id])

        assert result is True
        mock_membership_repo.get_many_by_organization_and_role.assert_awaited_once_with(
            organization_id, MembershipRole.OWNER
        )

    @pytest.mark.asyncio
    async def test_false_when_only_excluded_owners(
        self,
        query,
        organization_id,
        make_membership,
        mock_membership_repo,
        mock_current_context,
    ):
        """Excluding every confirmed owner leaves none."""
        owner = make_membership(role=MembershipRole.OWNER)
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[owner]
        )

        result = await query.has_confirmed_owners_except(organization_id, [owner.id])

        assert result is False
        mock_current_context.provider_id_for_organization.assert_awaited_once_with(
            organization_id
        )

    @pytest.mark.asyncio
    async def test_unconfirmed_owners_do_not_count(
        self, query, organization_id, make_membership, mock_membership_repo
    ):
        """Invited or accepted owners are not confirmed owners."""
        owner = make_membership(role=MembershipRole.OWNER)
        invited = make_membership(
            role=MembershipRole.OWNER, status=MembershipStatus.INVITED
        )
        accepted = make_membership(
            role=MembershipRole.OWNER, status=MembershipStatus.ACCEPTED
        )
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[owner, invited, accepted]
        )

        result = await query.has_confirmed_owners_except(organization_id, [owner.id])

        assert result is False

    @pytest.mark.asyncio
    async def test_confirmed_non_owners_do_not_count(
        self, query, organization_id, make_membership, mock_membership_repo
    ):
        """Only confirmed memberships holding the owner role count."""
        owner = make_membership(role=MembershipRole.OWNER)
        admin = make_membership(role=MembershipRole.ADMIN)
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[owner, admin]
        )

        result = await query.has_confirmed_owners_except(organization_id, [owner.id])

        assert result is False

    @pytest.mark.asyncio
    async def test_managing_provider_counts_as_owner(
        self,
        query,
        organization_id,
        make_membership,
        mock_membership_repo,
        mock_current_context,
    ):
        """A managing provider keeps the organization owned."""
        owner = make_membership(role=MembershipRole.OWNER)
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[owner]
        )
        mock_current_context.provider_id_for_organization = AsyncMock(
            return_value="provider-1"
        )

        result = await query.has_confirmed_owners_except(organization_id, [owner.id])

        assert result is True

    @pytest.mark.asyncio
    async def test_provider_ignored_when_not_included(
        self,
        query,
        organization_id,
        make_membership,
        mock_membership_repo,
        mock_current_context,
    ):
        """include_provider=False skips the provider fallback."""
        owner = make_membership(role=MembershipRole.OWNER)
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[owner]
        )
        mock_current_context.provider_id_for_organization = AsyncMock(
            return_value="provider-1"
        )

        result = await query.has_confirmed_owners_except(
            organization_id, [owner.id], include_provider=False
        )

        assert result is False
        mock_current_context.provider_id_for_organization.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_provider_not_consulted_when_owner_remains(
        self,
        query,
        organization_id,
        make_membership,
        mock_membership_repo,
        mock_current_context,
    ):
        """The provider lookup only runs when no owner remains."""
        staying = make_membership(role=MembershipRole.OWNER)
        mock_membership_repo.get_many_by_organization_and_role = AsyncMock(
            return_value=[staying]
        )

        assert await query.has_confirmed_owners_except(organization_id, []) is True
        mock_current_context.provider_id_for_organization.assert_not_awaited()
