"""Search Orchestrator - Main Engine Entry Point

Coordinates the search pipeline:
1. Input validation + market lookup (원격 호출 전)
2. Query translation (fallback chain)
3. Shopping search (SerpAPI)
4. Seller-count filtering
"""

from dataclasses import replace
from typing import Any, Dict, Optional

from geoshop.core.exceptions import ShoppingProviderException, SearchFailedException
from geoshop.core.logging import get_component_logger, sanitize_for_log
from geoshop.core.security import SecurityValidator

from .markets import Market, MarketRegistry
from .result import ProductDetails, ResultSet, TranslationResult
from .strategy import SelectionStrategy, ShoppingSearchCapability, SourceSelection
from .translation import QueryTranslator

logger = get_component_logger("SEARCH")


class SearchOrchestrator:
    """검색 엔진 오케스트레이터

    Market 검증 → 번역 → 검색 → 필터링 파이프라인을 관리합니다.
    검증 오류는 원격 호출 없이 즉시 ValidationException 으로 보고되고,
    제공자 오류는 SearchFailedException 으로 변환됩니다. 자동 재시도는 없습니다.
    """

    def __init__(
        self,
        registry: MarketRegistry,
        translator: QueryTranslator,
        shopping: ShoppingSearchCapability,
        ui_language: str = "en",
    ):
        """
        Args:
            registry: 시장 레지스트리
            translator: 번역 전략 체인
            shopping: 쇼핑 검색 기능 (search_shopping/product_details 구현)
            ui_language: 검색 결과 UI 언어 (hl)
        """
        if registry is None:
            raise ValueError("registry must not be None")
        if translator is None:
            raise ValueError("translator must not be None")
        if shopping is None:
            raise ValueError("shopping must not be None")

        self.registry = registry
        self.translator = translator
        self.shopping = shopping
        self.ui_language = ui_language
        self.selection = SelectionStrategy()

    def _validate(self, query: Optional[str], market_code: Optional[str]) -> tuple[str, Market]:
        SecurityValidator.require(query=query, geolocation=market_code)
        clean_query = SecurityValidator.validate_query(query)
        market = self.registry.require(market_code)
        return clean_query, market

    async def translate(self, query: Optional[str], market_code: Optional[str]) -> TranslationResult:
        """검증 후 번역만 수행 (번역 실패는 원문 반환)

        original_query 는 호출자가 보낸 값 그대로이고, 번역에는 앞뒤 공백을 제거한 검색어를 씁니다.
        """
        clean_query, market = self._validate(query, market_code)
        result = await self.translator.translate(clean_query, market)
        return replace(result, original_query=query)

    async def search(
        self,
        query: Optional[str],
        market_code: Optional[str],
        selection: SourceSelection,
    ) -> ResultSet:
        """통합 검색 실행

        Args:
            query: 원본 검색어
            market_code: 시장 코드
            selection: 판매처 수 선택 기준

        Returns:
            ResultSet: 필터링된 결과

        Raises:
            ValidationException: 입력 누락/잘못된 시장 (원격 호출 없음)
            SearchFailedException: 제공자 오류
        """
        clean_query, market = self._validate(query, market_code)
        label = "Search" if selection == SourceSelection.MULTI_SOURCE else "Single-source search"

        translation = await self.translator.translate(clean_query, market)
        logger.info(
            f"{label} started: query='{sanitize_for_log(clean_query)}', "
            f"translated='{sanitize_for_log(translation.translated_query)}', market={market.code}"
        )

        try:
            payload = await self.shopping.search_shopping(
                translation.translated_query, market.code, self.ui_language
            )
        except ShoppingProviderException as e:
            logger.error(f"{label} failed: market={market.code}, error={e}")
            raise SearchFailedException(label, self._failure_detail(e)) from e

        items = self.selection.extract_items(payload)
        results = self.selection.select(items, selection)
        logger.info(
            f"{label} completed: market={market.code}, "
            f"received={len(items)}, kept={len(results)}"
        )

        return ResultSet(
            market=market,
            original_query=query,
            translated_query=translation.translated_query,
            results=results,
            translation=translation,
        )

    async def search_multi_source(self, query: Optional[str], market_code: Optional[str]) -> ResultSet:
        """여러 판매처에서 판매되는 상품만"""
        return await self.search(query, market_code, SourceSelection.MULTI_SOURCE)

    async def search_single_source(self, query: Optional[str], market_code: Optional[str]) -> ResultSet:
        """단일 판매처 상품만 (multiple_sources 가 없으면 단일로 간주)"""
        return await self.search(query, market_code, SourceSelection.SINGLE_SOURCE)

    async def fetch_product_details(
        self, product_id: Optional[str], market_code: Optional[str]
    ) -> ProductDetails:
        """상품 상세 조회 - 번역/필터링 없음"""
        SecurityValidator.require(product_id=product_id, geolocation=market_code)
        clean_id = SecurityValidator.validate_product_id(product_id)
        market = self.registry.require(market_code)

        try:
            payload = await self.shopping.product_details(clean_id, market.code, self.ui_language)
        except ShoppingProviderException as e:
            logger.error(f"Product details failed: product_id={clean_id}, error={e}")
            raise SearchFailedException("Fetch product details", self._failure_detail(e)) from e

        logger.info(f"Product details fetched: product_id={clean_id}, market={market.code}")
        return ProductDetails(
            market=market,
            product_id=clean_id,
            payload=payload if isinstance(payload, dict) else {},
        )

    @staticmethod
    def _failure_detail(error: ShoppingProviderException) -> Any:
        """제공자 응답 본문이 있으면 그대로, 없으면 메시지"""
        if error.payload is not None:
            return error.payload
        return error.message
