"""공유 HTTP 클라이언트 (httpx)

- 요청마다 AsyncClient 를 만들면 TLS/커넥션 오버헤드가 커지므로 서비스 단위로 재사용합니다.
- 서비스 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import httpx

from geoshop.core.logging import get_component_logger

logger = get_component_logger("HTTP_CLIENT")


class SharedHttpClient:
    def __init__(
        self,
        *,
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._lock = asyncio.Lock()
        self._client: Optional[httpx.AsyncClient] = None
        self._timeout_s = timeout_s
        self._transport = transport

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._lock:
            if self._client is not None:
                return self._client
            self._client = httpx.AsyncClient(
                headers=self.default_headers(),
                timeout=self._timeout_s,
                follow_redirects=True,
                transport=self._transport,
            )
            return self._client

    def default_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": "geoshop/1.0",
        }

    async def get(self, url: str, *, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """GET 요청

        Raises:
            httpx.HTTPError: 전송 오류 (상태 코드 검사는 호출자 책임)
        """
        client = await self._ensure_client()
        try:
            return await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.info(f"GET failed: {type(e).__name__}: {e!r}")
            raise

    async def post_json(
        self,
        url: str,
        *,
        json: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        client = await self._ensure_client()
        try:
            return await client.post(url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.info(f"POST failed: {type(e).__name__}: {e!r}")
            raise

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def close(self) -> None:
        async with self._lock:
            if self._client is None:
                return
            try:
                await self._client.aclose()
            except httpx.HTTPError as e:
                logger.warning(f"close failed: {e!r}")
            self._client = None


def error_payload(response: httpx.Response) -> Any:
    """오류 응답 본문 (JSON 이면 파싱, 아니면 텍스트)"""
    try:
        return response.json()
    except ValueError:
        return response.text or None
