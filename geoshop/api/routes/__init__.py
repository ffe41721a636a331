"""API routes package."""

from .excel_routes import router as excel_router
from .health_routes import router as health_router
from .market_routes import router as market_router
from .search_routes import router as search_router

__all__ = ["excel_router", "health_router", "market_router", "search_router"]
