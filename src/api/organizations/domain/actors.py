"""Actors that can request membership changes.

An actor is either a human user acting through a request, or an automated
system source (directory sync, domain verification, public API). System
actors are exempt from the self-removal and peer-authorization rules that
apply to users.
"""

from __future__ import annotations

from dataclasses import dataclass

from organizations.domain.value_objects import EventSystemUser, UserId


@dataclass(frozen=True)
class UserActor:
    """A human user performing the operation."""

    user_id: UserId


@dataclass(frozen=True)
class SystemActor:
    """An automated source performing the operation."""

    system_user: EventSystemUser


Actor = UserActor | SystemActor


def acting_user_id(actor: Actor | None) -> UserId | None:
    """Return the user behind ``actor``, or None for system or unattributed calls."""
    match actor:
        case UserActor(user_id=user_id):
            return user_id
        case _:
            return None


def system_user(actor: Actor | None) -> EventSystemUser | None:
    """Return the system source behind ``actor``, if any."""
    match actor:
        case SystemActor(system_user=source):
            return source
        case _:
            return None
