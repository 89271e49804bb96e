"""FastAPI REST API for seat layout planning.

This module provides a REST API for calculating seat layouts, validating
project configurations, and exporting to various formats.

Usage:
    uvicorn seatplanner.web:app --reload
"""

from seatplanner.web.app import app, create_app

__all__ = ["app", "create_app"]
