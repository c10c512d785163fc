"""Infrastructure adapters for the Organizations bounded context."""

from organizations.infrastructure.audit_event_service import AuditEventService
from organizations.infrastructure.current_context import AuthorizationCurrentContext

__all__ = ["AuditEventService", "AuthorizationCurrentContext"]
