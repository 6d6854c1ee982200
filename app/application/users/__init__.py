"""
Application layer for the users bounded context.

Use cases coordinate validation and the repository port to fulfill
CRUD operations. No framework or infrastructure imports allowed.
"""
