"""SerpAPI Google Shopping / Google Product 클라이언트"""

from __future__ import annotations

from typing import Any, Dict

import httpx

from geoshop.core.exceptions import ShoppingProviderException
from geoshop.core.logging import get_component_logger

from .http_client import SharedHttpClient, error_payload

logger = get_component_logger("SERPAPI")


SHOPPING_ENGINE = "google_shopping"
PRODUCT_ENGINE = "google_product"


class SerpApiClient:
    """쇼핑 검색 기능 구현 (ShoppingSearchCapability)

    API 키가 없으면 HTTP 호출 없이 즉시 ShoppingProviderException 을 던집니다.
    200 응답 본문의 "error" 필드는 오류로 보지 않습니다 (결과 없음과 동일 취급).
    """

    def __init__(self, http: SharedHttpClient, *, api_key: str, api_url: str) -> None:
        self.http = http
        self.api_key = api_key
        self.api_url = api_url

    async def search_shopping(self, query: str, country: str, language: str) -> Dict[str, Any]:
        return await self._request({
            "engine": SHOPPING_ENGINE,
            "hl": language,
            "gl": country,
            "q": query,
        })

    async def product_details(self, product_id: str, country: str, language: str) -> Dict[str, Any]:
        return await self._request({
            "engine": PRODUCT_ENGINE,
            "hl": language,
            "gl": country,
            "product_id": product_id,
        })

    async def _request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise ShoppingProviderException(
                "SerpAPI key is not configured",
                payload={"error": "SerpAPI key is not configured"},
            )

        try:
            response = await self.http.get(self.api_url, params={**params, "api_key": self.api_key})
        except httpx.HTTPError as e:
            raise ShoppingProviderException(f"{type(e).__name__}: {e}") from e

        if response.is_error:
            raise ShoppingProviderException(
                f"SerpAPI returned HTTP {response.status_code}",
                status=response.status_code,
                payload=error_payload(response),
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ShoppingProviderException(
                "SerpAPI returned a non-JSON body", status=response.status_code
            ) from e

        if not isinstance(data, dict):
            logger.warning(f"Unexpected payload type: {type(data).__name__}")
            return {}
        if data.get("error"):
            logger.info(f"Provider message: {data.get('error')}")
        return data
