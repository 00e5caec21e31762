"""
Restaurant API — Application Package Initializer
=================================================

What: Backend for the restaurant website (menu, ordering, reservations,
      testimonials), exposed as a single RPC endpoint.
Who:  Imported by uvicorn (`restaurant_api.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Routes + RPC router (API)       │  ← HTTP and procedure dispatch only
    ├─────────────────────────────────────┤
    │      Services (one per entity)      │  ← One persistence call per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    RPC routes never query the database themselves; procedures delegate to the
    entity services, which own the decimal/JSON coercion at the storage
    boundary (see services/conversions.py).
"""

__version__ = "1.0.0"
