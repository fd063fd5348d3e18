"""Infrastructure layer — SQLite schema, engine, and the roster store.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
