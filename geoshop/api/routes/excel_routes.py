"""엑셀 버퍼 / 내보내기 엔드포인트"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from geoshop.api.dependencies import get_exporter, get_market_registry, get_result_buffer
from geoshop.core.exceptions import ValidationException
from geoshop.engine import MarketRegistry
from geoshop.schemas.shopping_schema import (
    BufferCountResponse,
    BufferSummaryItem,
    ClearResponse,
    SaveMultipleRequest,
    SaveResponse,
)
from geoshop.services import ExcelExporter, ResultBuffer

router = APIRouter(prefix="/api", tags=["excel"])


@router.post("/save-to-excel", response_model=SaveResponse)
async def save_to_excel(
    record: Dict[str, Any] = Body(...),
    buffer: ResultBuffer = Depends(get_result_buffer),
):
    """행 하나 저장 (savedAt 은 서버가 기록)"""
    total = buffer.append(record)
    return SaveResponse(message="Product saved to Excel data", total_saved=total)


@router.post("/save-multiple-to-excel", response_model=SaveResponse)
async def save_multiple_to_excel(
    request: SaveMultipleRequest,
    buffer: ResultBuffer = Depends(get_result_buffer),
    registry: MarketRegistry = Depends(get_market_registry),
):
    """여러 행 저장

    - products: 이미 펼쳐진 판매처별 행
    - item + geolocation (+ translatedQuery): 상품 하나를 서버에서 판매처별 행으로 펼침
    """
    if isinstance(request.products, list):
        saved = len(request.products)
        total = buffer.extend(request.products)
    elif request.products is None and request.item is not None:
        market = registry.require(request.geolocation)
        saved, total = buffer.extend_item(request.item, market.code, request.translated_query)
    else:
        raise ValidationException("products", "must be an array", message="Products array is required")

    return SaveResponse(message=f"{saved} products saved to Excel data", total_saved=total)


@router.get("/export-excel")
async def export_excel(
    buffer: ResultBuffer = Depends(get_result_buffer),
    exporter: ExcelExporter = Depends(get_exporter),
):
    """버퍼 내용을 xlsx 로 다운로드"""
    exported = await run_in_threadpool(exporter.render, buffer.snapshot())
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": exported.content_disposition},
    )


@router.get("/excel-data-count", response_model=BufferCountResponse)
async def get_excel_data_count(buffer: ResultBuffer = Depends(get_result_buffer)):
    """저장된 행 수와 요약"""
    summary = [BufferSummaryItem(**item) for item in buffer.summary()]
    return BufferCountResponse(count=len(summary), data=summary)


@router.delete("/excel-data", response_model=ClearResponse)
async def clear_excel_data(buffer: ResultBuffer = Depends(get_result_buffer)):
    """버퍼 비우기"""
    buffer.clear()
    return ClearResponse(message="Excel data cleared")
