"""FastAPI REST API for plate cutting calculations.

This module provides a REST API for calculating cutting layouts,
validating configurations and listing export formats.

Usage:
    uvicorn platecut.web:app --reload
"""

from platecut.web.app import app, create_app

__all__ = ["app", "create_app"]
