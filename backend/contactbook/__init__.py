"""
Contact Book Backend — Application Package Initializer
======================================================

What: Marks the `contactbook` directory as a Python package.
Why:  Enables module imports like `from contactbook.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered architecture end to end:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, hashing, one statement each
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Every request maps to exactly one SQL statement. No state survives a
    request except the shared connection pool.
"""

__version__ = "1.0.0"
