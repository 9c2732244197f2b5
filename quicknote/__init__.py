"""
QuickNote Backend: Application Package Initializer
===================================================

What: Marks the `quicknote` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin request → validate → persist → respond pipeline:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Validation + Handlers)  │  ← Ordered checks, outcome mapping
    ├─────────────────────────────────────┤
    │       Note Store (Persistence)      │  ← SQLAlchemy or in-memory
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data shapes)    │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
