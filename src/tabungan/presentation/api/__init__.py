"""REST API presentation layer for Tabungan.

This package provides a FastAPI-based REST API for the Tabungan service.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain/auth errors to HTTP responses
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from tabungan.presentation.api.app import create_app

__all__ = ["create_app"]
