"""Audit event service writing membership events to the audit log.

Events go to a dedicated ``audit`` structlog logger so they can be routed
separately from operational logs.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

import structlog

from organizations.domain.events import MembershipRemoved
from organizations.domain.value_objects import EventType

if TYPE_CHECKING:
    from organizations.domain.actors import Actor
    from organizations.domain.aggregates import Membership
    from organizations.domain.events import DomainEvent


class AuditEventService:
    """IEventService that records domain events as structured audit entries."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger("audit")

    async def log_membership_event(
        self,
        membership: Membership,
        event_type: EventType,
        actor: Actor | None = None,
    ) -> None:
        """Record an audit event for ``membership``.

        Raises:
            ValueError: If event_type has no membership event
        """
        match event_type:
            case EventType.ORGANIZATION_USER_REMOVED:
                event = MembershipRemoved.from_membership(membership, actor)
            case _:
                raise ValueError(f"Unsupported membership event type: {event_type}")

        self._write(event)

    def _write(self, event: DomainEvent) -> None:
        payload = asdict(event)
        event_type = payload.pop("event_type")
        payload["occurred_at"] = event.occurred_at.isoformat()
        self._logger.info(str(event_type), **payload)
