"""Authorization primitives for fine-grained access control.

This module provides shared authorization types and abstractions used across
bounded contexts.
"""

from shared_kernel.authorization.protocols import AuthorizationProvider
from shared_kernel.authorization.types import (
    Permission,
    RelationshipTuple,
    RelationType,
    ResourceType,
    format_resource,
    format_subject,
)

__all__ = [
    "AuthorizationProvider",
    "ResourceType",
    "RelationType",
    "RelationshipTuple",
    "Permission",
    "format_resource",
    "format_subject",
]
