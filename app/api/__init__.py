"""
VISA STATS - API Routers
app/api/__init__.py

Importa y exporta todos los routers modulares.
"""

from .pages import router as pages_router
from .visa_stats import router as visa_stats_router
from .export import router as export_router

__all__ = [
    "pages_router",
    "visa_stats_router",
    "export_router",
]
