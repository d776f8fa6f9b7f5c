"""FastAPI REST API for sheet cutting optimization.

This module provides a REST API for calculating cutting layouts and
listing the available placement engines.

Usage:
    uvicorn sheetcut.web:app --reload
"""

from sheetcut.web.app import app, create_app

__all__ = ["app", "create_app"]
