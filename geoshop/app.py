"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager
from typing import Mapping, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from geoshop.api import excel_router, health_router, market_router, search_router
from geoshop.core.config import Settings, settings as default_settings
from geoshop.core.exceptions import GeoShopException
from geoshop.core.logging import get_component_logger
from geoshop.schemas.shopping_schema import ErrorResponse
from geoshop.services import ServiceContainer, build_services

logger = get_component_logger("APP")
api_logger = get_component_logger("API")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    services: ServiceContainer = app.state.services
    logger.info("Starting application...")
    logger.info(f"SerpAPI Key: {'Configured' if services.settings.search_enabled else 'Missing'}")
    logger.info(
        f"Translation: {'DeepSeek' if services.settings.translation_enabled else 'local fallback'}"
    )
    yield
    logger.info("Shutting down application...")
    await services.aclose()


async def geoshop_exception_handler(request: Request, exc: GeoShopException) -> JSONResponse:
    """도메인 예외 → {success, error, errorCode, details}"""
    if exc.status_code >= 500:
        api_logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        api_logger.warning(f"{request.method} {request.url.path} rejected: {exc}")

    body = ErrorResponse(error=exc.message, error_code=exc.error_code, details=exc.details or None)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 본문 형식 오류는 422 대신 400"""
    api_logger.warning(f"{request.method} {request.url.path} invalid body: {len(exc.errors())} error(s)")
    body = ErrorResponse(
        error="Invalid request body",
        error_code="VALIDATION_ERROR",
        details={"errors": [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
            for error in exc.errors()
        ]},
    )
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


def create_app(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    translation_table: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        settings: 설정 (기본값: 환경 변수 기반 전역 설정)
        transport: 원격 API 호출용 httpx 전송 계층 (테스트용)
        translation_table: 로컬 번역표 (테스트용)

    Returns:
        FastAPI 앱 인스턴스
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )
    app.state.services = build_services(
        settings, transport=transport, translation_table=translation_table
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GeoShopException, geoshop_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(market_router)
    app.include_router(search_router)
    app.include_router(excel_router)

    return app


# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
