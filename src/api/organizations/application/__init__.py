"""Application layer for the Organizations bounded context."""
