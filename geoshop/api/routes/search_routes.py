"""쇼핑 검색 엔드포인트 (Engine Layer 위임)

HTTP Layer 는 Engine Layer 로 요청을 넘기고 결과를 응답 모델로 바꾸는 역할만 합니다.
검증 오류(400)와 검색 실패(500)는 앱의 예외 핸들러가 응답으로 변환합니다.
"""
from fastapi import APIRouter, Depends

from geoshop.api.dependencies import get_orchestrator
from geoshop.core.logging import get_component_logger
from geoshop.engine import SearchOrchestrator
from geoshop.schemas.shopping_schema import (
    ProductDetailsRequest,
    ProductDetailsResponse,
    QueryRequest,
    SearchResponse,
)

router = APIRouter(prefix="/api", tags=["search"])
logger = get_component_logger("API")


@router.post("/search", response_model=SearchResponse)
async def search_multi_source(
    request: QueryRequest,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """여러 판매처 상품만 검색"""
    logger.info(f"Search request: geolocation={request.geolocation}")
    result = await orchestrator.search_multi_source(request.query, request.geolocation)
    return SearchResponse.from_result(result)


@router.post("/search-single-source", response_model=SearchResponse)
async def search_single_source(
    request: QueryRequest,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """단일 판매처 상품만 검색"""
    logger.info(f"Single-source search request: geolocation={request.geolocation}")
    result = await orchestrator.search_single_source(request.query, request.geolocation)
    return SearchResponse.from_result(result)


@router.post("/product-details", response_model=ProductDetailsResponse)
async def get_product_details(
    request: ProductDetailsRequest,
    orchestrator: SearchOrchestrator = Depends(get_orchestrator),
):
    """상품 상세 (번역/필터링 없음)"""
    result = await orchestrator.fetch_product_details(request.product_id, request.geolocation)
    return ProductDetailsResponse.from_result(result)
