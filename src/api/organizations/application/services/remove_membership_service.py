"""Membership removal service for the Organizations bounded context.

Removes members from an organization, single or in batch, enforcing who
may remove whom and that every organization keeps a confirmed owner.
"""

from __future__ import annotations

from typing import Iterable

from infrastructure.settings import MembershipSettings, get_membership_settings
from organizations.application.observability import (
    DefaultRemoveMembershipServiceProbe,
    RemoveMembershipServiceProbe,
)
from organizations.application.value_objects import (
    RemovalFailed,
    RemovalOutcome,
    RemovalSucceeded,
)
from organizations.domain.actors import (
    Actor,
    UserActor,
    acting_user_id,
    system_user,
)
from organizations.domain.aggregates import Membership
from organizations.domain.value_objects import (
    EventType,
    MembershipId,
    MembershipRole,
    OrganizationId,
    UserId,
)
from organizations.ports.exceptions import (
    CANNOT_REMOVE_YOURSELF,
    LAST_CONFIRMED_OWNER,
    ONLY_OWNERS_CAN_DELETE_OWNERS,
    USER_NOT_FOUND,
    USERS_INVALID,
    BadRequestError,
    NotFoundError,
)
from organizations.ports.protocols import (
    ICurrentContext,
    IEventService,
    IHasConfirmedOwnersExceptQuery,
)
from organizations.ports.repositories import IMembershipRepository


class RemoveMembershipService:
    """Application service for removing organization members.

    Rules, in the order they are applied:
    - the membership must exist and belong to the stated organization
      (NotFoundError otherwise)
    - a user cannot remove their own membership
    - only an owner can remove an owner
    - the organization must keep at least one confirmed owner

    The first two actor rules only apply to a UserActor. System actors and
    unattributed internal calls skip them, but never skip the owner
    invariant.
    """

    def __init__(
        self,
        membership_repository: IMembershipRepository,
        current_context: ICurrentContext,
        has_confirmed_owners_except_query: IHasConfirmedOwnersExceptQuery,
        event_service: IEventService,
        probe: RemoveMembershipServiceProbe | None = None,
        settings: MembershipSettings | None = None,
    ):
        """Initialize RemoveMembershipService with dependencies.

        Args:
            membership_repository: Repository for membership lookup and deletion
            current_context: Authorization context of the requesting user
            has_confirmed_owners_except_query: Query guarding the owner invariant
            event_service: Audit event sink
            probe: Optional domain probe for observability
            settings: Optional membership settings (defaults to environment)
        """
        self._membership_repository = membership_repository
        self._current_context = current_context
        self._has_confirmed_owners_except_query = has_confirmed_owners_except_query
        self._event_service = event_service
        self._probe = probe or DefaultRemoveMembershipServiceProbe()
        self._settings = settings or get_membership_settings()

    async def remove_membership(
        self,
        organization_id: OrganizationId,
        membership_id: MembershipId,
        actor: Actor | None = None,
    ) -> None:
        """Remove a single membership by its ID.

        Args:
            organization_id: The organization the membership must belong to
            membership_id: The membership to remove
            actor: Who is removing it; None for unattributed internal calls

        Raises:
            NotFoundError: If the membership does not exist or belongs to
                another organization
            BadRequestError: If a removal rule is violated
        """
        membership = await self._membership_repository.get_by_id(membership_id)
        if membership is None:
            self._probe.membership_not_found(
                organization_id=organization_id.value,
                membership_id=membership_id.value,
                reason="missing",
            )
            raise NotFoundError(USER_NOT_FOUND)

        await self._remove(organization_id, membership, actor)

    async def remove_membership_by_user_id(
        self,
        organization_id: OrganizationId,
        user_id: UserId,
        actor: Actor | None = None,
    ) -> None:
        """Remove the membership a user holds in an organization.

        Args:
            organization_id: The organization to remove the user from
            user_id: The user whose membership is removed
            actor: Who is removing it; None for unattributed internal calls

        Raises:
            NotFoundError: If the user holds no membership in the organization
            BadRequestError: If a removal rule is violated
        """
        membership = await self._membership_repository.get_by_organization_and_user(
            organization_id, user_id
        )
        if membership is None:
            self._probe.membership_not_found(
                organization_id=organization_id.value,
                membership_id=None,
                reason="missing",
            )
            raise NotFoundError(USER_NOT_FOUND)

        await self._remove(organization_id, membership, actor)

    async def remove_memberships(
        self,
        organization_id: OrganizationId,
        membership_ids: Iterable[MembershipId],
        actor: Actor | None = None,
    ) -> list[RemovalOutcome]:
        """Remove several memberships, reporting an outcome for each.

        Entries that cannot be resolved in the organization, or that break
        an actor rule, fail individually without stopping the batch. The
        owner invariant is checked once for every owner in the batch
        before anything is deleted.

        Args:
            organization_id: The organization the memberships must belong to
            membership_ids: The memberships to remove
            actor: Who is removing them; None for unattributed internal calls

        Returns:
            One outcome per requested ID, in request order

        Raises:
            BadRequestError: If removing the batch would leave the
                organization without a confirmed owner
        """
        requested = list(membership_ids)
        found = await self._membership_repository.get_many(requested)
        candidates = {m.id: m for m in found if m.belongs_to(organization_id)}

        candidate_owner_ids = [m.id for m in candidates.values() if m.is_owner()]
        actor_is_owner = False
        if candidate_owner_ids:
            await self._ensure_owner_remains_after_batch(
                organization_id, candidate_owner_ids
            )
            if isinstance(actor, UserActor):
                actor_is_owner = await self._current_context.is_organization_owner(
                    organization_id
                )

        outcomes: list[RemovalOutcome] = []
        for membership_id in requested:
            membership = candidates.pop(membership_id, None)
            if membership is None:
                outcomes.append(RemovalFailed(membership_id, USERS_INVALID))
                continue

            try:
                self._check_actor_may_remove(membership, actor, actor_is_owner)
                await self._delete(membership, actor)
            except BadRequestError as e:
                outcomes.append(RemovalFailed(membership_id, e.message))
            else:
                outcomes.append(RemovalSucceeded(membership_id))

        removed = sum(1 for outcome in outcomes if outcome.succeeded)
        self._probe.membership_batch_removed(
            organization_id=organization_id.value,
            requested=len(requested),
            removed=removed,
            failed=len(outcomes) - removed,
        )
        return outcomes

    async def _remove(
        self,
        organization_id: OrganizationId,
        membership: Membership,
        actor: Actor | None,
    ) -> None:
        """Validate and remove one resolved membership."""
        if not membership.belongs_to(organization_id):
            self._probe.membership_not_found(
                organization_id=organization_id.value,
                membership_id=membership.id.value,
                reason="organization_mismatch",
            )
            raise NotFoundError(USER_NOT_FOUND)

        actor_is_owner = False
        if isinstance(actor, UserActor) and membership.is_owner():
            actor_is_owner = await self._current_context.is_organization_owner(
                organization_id
            )
        self._check_actor_may_remove(membership, actor, actor_is_owner)

        if membership.is_owner():
            has_other_owner = (
                await self._has_confirmed_owners_except_query.has_confirmed_owners_except(
                    organization_id,
                    [membership.id],
                    include_provider=self._settings.include_provider_in_owner_check,
                )
            )
            if not has_other_owner:
                self._probe.last_owner_removal_rejected(
                    organization_id=organization_id.value,
                    membership_ids=[membership.id.value],
                )
                raise BadRequestError(LAST_CONFIRMED_OWNER)

        await self._delete(membership, actor)

    def _check_actor_may_remove(
        self,
        membership: Membership,
        actor: Actor | None,
        actor_is_owner: bool,
    ) -> None:
        """Apply the rules that depend on who is removing the membership.

        Raises:
            BadRequestError: On self-removal, or a non-owner removing an owner
        """
        match actor:
            case UserActor(user_id=user_id):
                if membership.is_held_by(user_id):
                    self._probe.self_removal_rejected(
                        organization_id=membership.organization_id.value,
                        membership_id=membership.id.value,
                    )
                    raise BadRequestError(CANNOT_REMOVE_YOURSELF)

                if membership.is_owner() and not actor_is_owner:
                    self._probe.owner_removal_rejected(
                        organization_id=membership.organization_id.value,
                        membership_id=membership.id.value,
                        acting_user_id=user_id.value,
                    )
                    raise BadRequestError(ONLY_OWNERS_CAN_DELETE_OWNERS)
            case _:
                pass

    async def _ensure_owner_remains_after_batch(
        self,
        organization_id: OrganizationId,
        candidate_owner_ids: list[MembershipId],
    ) -> None:
        """Reject a batch that would remove every confirmed owner.

        Raises:
            BadRequestError: If the batch covers the organization's whole
                owner set, or no confirmed owner would remain
        """
        candidates = set(candidate_owner_ids)
        owners = await self._membership_repository.get_many_by_organization_and_role(
            organization_id, MembershipRole.OWNER
        )
        removes_every_owner = all(owner.id in candidates for owner in owners)

        if removes_every_owner or not (
            await self._has_confirmed_owners_except_query.has_confirmed_owners_except(
                organization_id,
                candidate_owner_ids,
                include_provider=self._settings.include_provider_in_owner_check,
            )
        ):
            self._probe.last_owner_removal_rejected(
                organization_id=organization_id.value,
                membership_ids=[owner_id.value for owner_id in candidate_owner_ids],
            )
            raise BadRequestError(LAST_CONFIRMED_OWNER)

    async def _delete(self, membership: Membership, actor: Actor | None) -> None:
        """Delete the membership and record the audit event."""
        await self._membership_repository.delete(membership)
        await self._event_service.log_membership_event(
            membership, EventType.ORGANIZATION_USER_REMOVED, actor
        )

        actor_user = acting_user_id(actor)
        source = system_user(actor)
        self._probe.membership_removed(
            organization_id=membership.organization_id.value,
            membership_id=membership.id.value,
            acting_user_id=actor_user.value if actor_user else None,
            system_user=source.value if source else None,
        )
