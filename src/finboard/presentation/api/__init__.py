"""REST API presentation layer for finboard.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain exception to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic response schemas
"""

from finboard.presentation.api.app import create_app

__all__ = ["create_app"]
