"""
Workboard Backend: Application Package
========================================

Employee and task record management over HTTP.

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, JSON bodies
    ├─────────────────────────────────────┤
    │   Services (ResourceRepository)     │  ← one SQL statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic
    ├─────────────────────────────────────┤
    │     Database (Storage Engine)       │  ← AsyncEngine owned by the app
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
