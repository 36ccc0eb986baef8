"""FastAPI REST API for furniture fit checks.

This module provides a REST API for browsing the catalog, listing viewer
modes, and evaluating or validating scenarios.

Usage:
    uvicorn roomfit.web:app --reload
    roomfit serve --port 8000
"""

from roomfit.web.app import app, create_app

__all__ = ["app", "create_app"]
