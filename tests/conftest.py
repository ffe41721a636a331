"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Stub/Fake 주입 (원격 API 호출 금지)
- 앱 팩토리 픽스처
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest
import pytest_asyncio


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from geoshop.core.config import Settings  # noqa: E402
from geoshop.engine import MarketRegistry  # noqa: E402
from tests.stubs import ProviderRecorder, StubShopping  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def registry() -> MarketRegistry:
    return MarketRegistry()


@pytest.fixture
def market_sk(registry: MarketRegistry):
    return registry.require("sk")


@pytest.fixture
def stub_shopping() -> StubShopping:
    return StubShopping()


# ============================================================================
# API 테스트용 픽스처
# ============================================================================

@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """환경 변수/.env 와 무관한 Settings 생성기"""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {"deepseek_api_key": "", "serpapi_key": ""}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def provider() -> ProviderRecorder:
    return ProviderRecorder()


@pytest_asyncio.fixture
async def make_client(make_settings, provider):
    """create_app 으로 만든 앱에 붙는 AsyncClient 생성기

    테스트가 끝나면 만든 앱마다 ServiceContainer.aclose() 를 호출합니다 (lifespan 종료와 동일).
    """
    from geoshop.app import create_app

    apps = []

    def _make(recorder: Optional[ProviderRecorder] = None, **settings_overrides: Any):
        recorder = recorder or provider
        app = create_app(make_settings(**settings_overrides), transport=recorder.transport)
        apps.append(app)
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://testserver"
        )
        return app, client

    yield _make

    for app in apps:
        await app.state.services.aclose()
