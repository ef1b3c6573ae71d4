"""
GameStore Backend - Application Package
=========================================

What: Marks the `gamestore` directory as a Python package.
Who:  Imported by uvicorn (gamestore.main:app), Alembic and pytest.

Layering:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (validation, mapping,  │  Business rules
    │            game workflow)           │
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  SQLAlchemy ORM + Pydantic DTOs
    ├─────────────────────────────────────┤
    │   Stores (in-memory list or SQL)    │  Persistence behind GameStore
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
