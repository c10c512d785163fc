"""Authorization type definitions for the relationship-based authorization store.

Defines resource types, relations, and permissions that map to the
authorization schema. These enums keep hardcoded strings out of the
bounded contexts that query the store.
"""

from dataclasses import dataclass
from enum import StrEnum


class ResourceType(StrEnum):
    """Resource types matching schema definitions."""

    USER = "user"
    ORGANIZATION = "organization"
    PROVIDER = "provider"


class RelationType(StrEnum):
    """Relations matching schema relations.

    Organization roles are resolved through permissions; only the provider
    relation is read back directly.
    """

    PROVIDER = "provider"


class Permission(StrEnum):
    """Permissions matching schema permissions.

    ``OWN`` resolves to the owner relation only; ``ADMINISTRATE`` resolves
    to owner or admin.
    """

    ADMINISTRATE = "administrate"
    OWN = "own"


@dataclass(frozen=True)
class RelationshipTuple:
    """A single relationship read back from the authorization store.

    Attributes:
        resource: Resource identifier (e.g., "organization:abc123")
        relation: Relation name (e.g., "owner", "provider")
        subject: Subject identifier (e.g., "user:alice")
    """

    resource: str
    relation: str
    subject: str

    @property
    def subject_id(self) -> str:
        """Return the identifier part of the subject."""
        return self.subject.split(":", 1)[-1]


def format_resource(resource_type: ResourceType, resource_id: str) -> str:
    """Format a resource identifier for the authorization store.

    Args:
        resource_type: The type of resource
        resource_id: The unique identifier for the resource

    Returns:
        Formatted resource string (e.g., "organization:abc123")

    Example:
        >>> format_resource(ResourceType.ORGANIZATION, "abc123")
        "organization:abc123"
    """
    return f"{resource_type}:{resource_id}"


def format_subject(subject_type: ResourceType, subject_id: str) -> str:
    """Format a subject identifier for the authorization store.

    Args:
        subject_type: The type of subject (usually USER)
        subject_id: The unique identifier for the subject

    Returns:
        Formatted subject string (e.g., "user:alice")

    Example:
        >>> format_subject(ResourceType.USER, "alice")
        "user:alice"
    """
    return f"{subject_type}:{subject_id}"
