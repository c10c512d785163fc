"""Protocol for membership removal service observability.

Defines the interface for domain probes that capture application-level
domain events for membership removal operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RemoveMembershipServiceProbe(Protocol):
    """Domain probe for membership removal operations."""

    def membership_removed(
        self,
        organization_id: str,
        membership_id: str,
        acting_user_id: str | None,
        system_user: str | None,
    ) -> None:
        """Record that a membership was removed."""
        ...

    def membership_not_found(
        self, organization_id: str, membership_id: str | None, reason: str
    ) -> None:
        """Record that the target membership could not be resolved."""
        ...

    def self_removal_rejected(self, organization_id: str, membership_id: str) -> None:
        """Record that a user tried to remove their own membership."""
        ...

    def owner_removal_rejected(
        self, organization_id: str, membership_id: str, acting_user_id: str
    ) -> None:
        """Record that a non-owner tried to remove an owner."""
        ...

    def last_owner_removal_rejected(
        self, organization_id: str, membership_ids: list[str]
    ) -> None:
        """Record that a removal would leave no confirmed owner."""
        ...

    def membership_batch_removed(
        self, organization_id: str, requested: int, removed: int, failed: int
    ) -> None:
        """Record the result of a batch removal."""
        ...

    def with_context(self, context: ObservationContext) -> RemoveMembershipServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRemoveMembershipServiceProbe:
    """Default implementation of RemoveMembershipServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _event_kwargs(self, **fields: Any) -> dict[str, Any]:
        """Merge bound context with event fields; event fields take precedence."""
        return {**self._get_context_kwargs(), **fields}

    def with_context(
        self, context: ObservationContext
    ) -> DefaultRemoveMembershipServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultRemoveMembershipServiceProbe(logger=self._logger, context=context)

    def membership_removed(
        self,
        organization_id: str,
        membership_id: str,
        acting_user_id: str | None,
        system_user: str | None,
    ) -> None:
        """Record that a membership was removed."""
        self._logger.info(
            "membership_removed",
            **self._event_kwargs(
                organization_id=organization_id,
                membership_id=membership_id,
                acting_user_id=acting_user_id,
                system_user=system_user,
            ),
        )

    def membership_not_found(
        self, organization_id: str, membership_id: str | None, reason: str
    ) -> None:
        """Record that the target membership could not be resolved."""
        self._logger.debug(
            "membership_not_found",
            **self._event_kwargs(
                organization_id=organization_id,
                membership_id=membership_id,
                reason=reason,
            ),
        )

    def self_removal_rejected(self, organization_id: str, membership_id: str) -> None:
        """Record that a user tried to remove their own membership."""
        self._logger.warning(
            "self_removal_rejected",
            **self._event_kwargs(
                organization_id=organization_id,
                membership_id=membership_id,
            ),
        )

    def owner_removal_rejected(
        self, organization_id: str, membership_id: str, acting_user_id: str
    ) -> None:
        """Record that a non-owner tried to remove an owner."""
        self._logger.warning(
            "owner_removal_rejected",
            **self._event_kwargs(
                organization_id=organization_id,
                membership_id=membership_id,
                acting_user_id=acting_user_id,
            ),
        )

    def last_owner_removal_rejected(
        self, organization_id: str, membership_ids: list[str]
    ) -> None:
        """Record that a removal would leave no confirmed owner."""
        self._logger.warning(
            "last_owner_removal_rejected",
            **self._event_kwargs(
                organization_id=organization_id,
                membership_ids=membership_ids,
            ),
        )

    def membership_batch_removed(
        self, organization_id: str, requested: int, removed: int, failed: int
    ) -> None:
        """Record the result of a batch removal."""
        self._logger.info(
            "membership_batch_removed",
            **self._event_kwargs(
                organization_id=organization_id,
                requested=requested,
                removed=removed,
                failed=failed,
            ),
        )
