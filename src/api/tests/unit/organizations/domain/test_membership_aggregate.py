"""Unit tests for the Membership aggregate and actors."""

from organizations.domain.actors import (
    SystemActor,
    UserActor,
    acting_user_id,
    system_user,
)
from organizations.domain.aggregates import Membership
from organizations.domain.value_objects import (
    EventSystemUser,
    MembershipId,
    MembershipRole,
    MembershipStatus,
    OrganizationId,
    UserId,
)


class TestMembership:
    """Tests for Membership helpers."""

    def test_belongs_to_own_organization_only(self, organization_id, make_membership):
        membership = make_membership()

        assert membership.belongs_to(organization_id)
        assert not membership.belongs_to(OrganizationId.generate())

    def test_is_held_by(self, make_membership):
        user_id = UserId.generate()
        membership = make_membership(user_id=user_id)

        assert membership.is_held_by(user_id)
        assert not membership.is_held_by(UserId.generate())
        assert not membership.is_held_by(None)

    def test_pending_invitation_is_held_by_nobody(self, organization_id):
        """An invitation without a user never matches an actor."""
        invitation = Membership(
            id=MembershipId.generate(),
            organization_id=organization_id,
            role=MembershipRole.USER,
            status=MembershipStatus.INVITED,
            email="invitee@example.com",
        )

        assert invitation.user_id is None
        assert not invitation.is_held_by(None)
        assert not invitation.is_held_by(UserId.generate())

    def test_confirmed_owner(self, make_membership):
        assert make_membership(role=MembershipRole.OWNER).is_confirmed_owner()
        assert not make_membership(
            role=MembershipRole.OWNER, status=MembershipStatus.ACCEPTED
        ).is_confirmed_owner()
        assert not make_membership(role=MembershipRole.ADMIN).is_confirmed_owner()


class TestActors:
    """Tests for actor helpers."""

    def test_user_actor_exposes_user(self):
        user_id = UserId.generate()
        actor = UserActor(user_id)

        assert acting_user_id(actor) == user_id
        assert system_user(actor) is None

    def test_system_actor_exposes_source(self):
        actor = SystemActor(EventSystemUser.SCIM)

        assert acting_user_id(actor) is None
        assert system_user(actor) == EventSystemUser.SCIM

    def test_no_actor(self):
        assert acting_user_id(None) is None
        assert system_user(None) is None
