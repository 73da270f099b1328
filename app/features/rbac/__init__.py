"""
Task access control feature module.

Implements the organization-scoped role hierarchy (OWNER > ADMIN > VIEWER) and
the pure policy functions that decide task access and query scoping.
"""
