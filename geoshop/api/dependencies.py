"""라우트 의존성 - app.state.services 에서 공유 객체를 꺼냅니다.

테스트에서는 app.dependency_overrides 로 교체할 수 있습니다.
"""
from fastapi import Depends, Request

from geoshop.core.config import Settings
from geoshop.engine import MarketRegistry, SearchOrchestrator
from geoshop.services import ExcelExporter, ResultBuffer, ServiceContainer


def get_services(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_settings(services: ServiceContainer = Depends(get_services)) -> Settings:
    return services.settings


def get_market_registry(services: ServiceContainer = Depends(get_services)) -> MarketRegistry:
    return services.registry


def get_orchestrator(services: ServiceContainer = Depends(get_services)) -> SearchOrchestrator:
    return services.orchestrator


def get_result_buffer(services: ServiceContainer = Depends(get_services)) -> ResultBuffer:
    return services.buffer


def get_exporter(services: ServiceContainer = Depends(get_services)) -> ExcelExporter:
    return services.exporter
