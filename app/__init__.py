"""
User service — CRUD REST API over a single User entity.

Application package root. Layered with ports & adapters:

Layers:
    - domain: Entity, validation rules, repository port (ABC), errors.
    - application: One use case per operation, DTOs, error translation.
    - infrastructure: SQLAlchemy engine factory and repository adapter.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
