"""
Infrastructure adapters for the users bounded context.

Each adapter implements a domain port (ABC) and talks to
the relational database through SQLAlchemy Core.
"""
