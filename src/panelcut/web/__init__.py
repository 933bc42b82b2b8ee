"""FastAPI REST API for the panel cut optimizer.

This module provides a REST API for deriving cabinet panels, packing them
onto stock sheets, and validating project configurations.

Usage (requires the ``server`` extra):
    uvicorn panelcut.web:app --reload
"""

from panelcut.web.app import app, create_app

__all__ = ["app", "create_app"]
