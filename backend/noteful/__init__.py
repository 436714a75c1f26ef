"""
Noteful Backend — Application Package Initializer
==================================================

What: Marks the `noteful` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Validation, Sanitizer)  │  ← Business rules
    ├─────────────────────────────────────┤
    │     Repositories (Persistence)      │  ← SQL statements per table
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Routes handle status codes and headers, services decide what is valid and
    what is safe to store, repositories only talk SQL.
"""

__version__ = "1.0.0"
