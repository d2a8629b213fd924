"""
Thoughts API — Application Package Initializer
================================================

What: Marks the `thoughts_api` directory as a Python package.
Why:  Enables module imports like `from thoughts_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service follows a small layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Pagination, ownership, credentials
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls; services raise the exceptions in
    `thoughts_api.exceptions`, which global handlers turn into JSON errors.
"""

__version__ = "1.0.0"
