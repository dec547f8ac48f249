"""HTTP routers."""

from .health import router as health_router
from .info import router as info_router

__all__ = ["health_router", "info_router"]
