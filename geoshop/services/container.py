"""서비스 컨테이너 - 앱 수명 동안 공유되는 객체의 생성과 정리

create_app() 에서 만들어 app.state.services 에 두고, lifespan 종료 시 aclose() 합니다.
라우트는 의존성 함수를 통해서만 접근합니다 (모듈 전역 싱글톤 없음).
"""
from dataclasses import dataclass
from typing import Mapping, Optional

import httpx

from geoshop.clients import DeepSeekClient, SerpApiClient, SharedHttpClient
from geoshop.core.config import Settings
from geoshop.core.logging import get_component_logger
from geoshop.engine import MarketRegistry, QueryTranslator, SearchOrchestrator
from geoshop.services.impl import ExcelExporter, ResultBuffer

logger = get_component_logger("SERVICES")


@dataclass
class ServiceContainer:
    settings: Settings
    http: SharedHttpClient
    registry: MarketRegistry
    translator: QueryTranslator
    orchestrator: SearchOrchestrator
    buffer: ResultBuffer
    exporter: ExcelExporter

    async def aclose(self) -> None:
        """HTTP 연결 정리 및 버퍼 비우기"""
        await self.http.close()
        self.buffer.clear()


def build_services(
    settings: Settings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    translation_table: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> ServiceContainer:
    """설정으로부터 서비스 그래프 구성

    Args:
        settings: 애플리케이션 설정
        transport: httpx 전송 계층 (테스트에서 MockTransport 주입)
        translation_table: 로컬 번역표 (None 이면 리소스 파일)
    """
    http = SharedHttpClient(timeout_s=settings.http_timeout_s, transport=transport)

    deepseek: Optional[DeepSeekClient] = None
    if settings.translation_enabled:
        deepseek = DeepSeekClient(
            http,
            api_key=settings.deepseek_api_key.strip(),
            api_url=settings.deepseek_api_url,
            model=settings.deepseek_model,
            temperature=settings.deepseek_temperature,
            max_tokens=settings.deepseek_max_tokens,
        )
    else:
        logger.info("DeepSeek API key not configured, using fallback translation")

    serpapi = SerpApiClient(
        http,
        api_key=settings.serpapi_key.strip() if settings.search_enabled else "",
        api_url=settings.serpapi_url,
    )

    registry = MarketRegistry()
    translator = QueryTranslator.default(deepseek, translation_table)
    orchestrator = SearchOrchestrator(
        registry=registry,
        translator=translator,
        shopping=serpapi,
        ui_language=settings.search_ui_language,
    )

    return ServiceContainer(
        settings=settings,
        http=http,
        registry=registry,
        translator=translator,
        orchestrator=orchestrator,
        buffer=ResultBuffer(),
        exporter=ExcelExporter(),
    )
