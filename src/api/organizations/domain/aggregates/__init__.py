"""Aggregates for the Organizations domain."""

from organizations.domain.aggregates.membership import Membership

__all__ = ["Membership"]
