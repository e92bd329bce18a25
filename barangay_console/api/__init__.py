"""API exports."""

from .routes import router as health_router
from .alerts import router as alerts_router

__all__ = ["health_router", "alerts_router"]
