"""API 엔드포인트 패키지 - export only."""

from .routes import excel_router, health_router, market_router, search_router

__all__ = ["excel_router", "health_router", "market_router", "search_router"]
