"""헬스 체크 엔드포인트"""
from datetime import datetime

from fastapi import APIRouter, Depends

from geoshop import __version__
from geoshop.api.dependencies import get_settings
from geoshop.core.config import Settings
from geoshop.schemas.shopping_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """
    헬스 체크 엔드포인트

    - 번역 모드 (remote | fallback)
    - SerpAPI 키 설정 여부 (키가 없으면 검색은 실패하므로 degraded)
    """
    status = "ok" if settings.search_enabled else "degraded"

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        translation="remote" if settings.translation_enabled else "fallback",
        search="configured" if settings.search_enabled else "missing",
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": "Multi-Geo Shopping Search",
        "version": __version__,
        "docs": "/docs"
    }
