"""시장 목록 / 번역 엔드포인트"""
from typing import Dict

from fastapi import APIRouter, Depends

from geoshop.api.dependencies import get_market_registry, get_orchestrator
from geoshop.engine import MarketRegistry, SearchOrchestrator
from geoshop.schemas.shopping_schema import GeoInfo, QueryRequest, TranslateResponse

router = APIRouter(prefix="/api", tags=["markets"])


@router.get("/geolocations", response_model=Dict[str, GeoInfo])
async def get_geolocations(registry: MarketRegistry = Depends(get_market_registry)):
    """지원 시장 목록 {code: {name, flag, language}}"""
    return registry.as_geo_map()


@router.post("/translate", response_model=TranslateResponse)
async def translate_query(
    request: QueryRequest,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
    registry: MarketRegistry = Depends(get_market_registry),
):
    """검색어를 시장 언어로 번역

    번역 자체는 실패하지 않습니다 (실패 시 원문). 입력 누락/잘못된 시장만 400.
    """
    result = await orchestrator.translate(request.query, request.geolocation)
    market = registry.require(request.geolocation)
    return TranslateResponse.from_result(result, market)
