"""
API Routes
"""

from .health import router as health_router
from .staging import router as staging_router

__all__ = [
    "health_router",
    "staging_router",
]
