"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .menu_match import router as menu_match_router

__all__ = [
    "menu_match_router",
]
