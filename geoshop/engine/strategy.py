"""Selection & Capability Strategy

판매처 수 기준 결과 선택 규칙과, 엔진이 의존하는 원격 기능 인터페이스를 정의합니다.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Protocol, Tuple

from .markets import Market
from .result import TranslationAttempt


class SourceSelection(str, Enum):
    """검색 결과 선택 기준

    제공자가 multiple_sources=True 로 보고한 상품만 MULTI_SOURCE 입니다.
    값이 없거나 불리언 True 가 아니면 SINGLE_SOURCE 로 분류됩니다.
    """

    MULTI_SOURCE = "multi_source"
    SINGLE_SOURCE = "single_source"


class TranslationStrategy(Protocol):
    """번역 전략 인터페이스

    예외를 던지지 않고 TranslationAttempt 로 성공/실패를 알려야 합니다.
    """

    name: str

    async def translate(self, query: str, market: Market) -> TranslationAttempt:
        ...


class TranslationCapability(Protocol):
    """원격 번역 기능 (DeepSeek 등)"""

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Raises:
            TranslationProviderException: 전송/제공자 오류
        """
        ...


class ShoppingSearchCapability(Protocol):
    """원격 쇼핑 검색 기능 (SerpAPI 등)"""

    async def search_shopping(self, query: str, country: str, language: str) -> Dict[str, Any]:
        """Raises:
            ShoppingProviderException: 전송 오류 또는 non-2xx 응답
        """
        ...

    async def product_details(self, product_id: str, country: str, language: str) -> Dict[str, Any]:
        ...


class SelectionStrategy:
    """판매처 수 기준 선택/분할

    Usage:
        multi, single = SelectionStrategy.partition(items)
        picked = SelectionStrategy.select(items, SourceSelection.MULTI_SOURCE)
    """

    @staticmethod
    def is_multi_source(item: Mapping[str, Any]) -> bool:
        """multiple_sources 가 정확히 True 인지 (문자열 "true" 등은 불인정)"""
        return item.get("multiple_sources") is True

    @staticmethod
    def matches(item: Mapping[str, Any], selection: SourceSelection) -> bool:
        multi = SelectionStrategy.is_multi_source(item)
        return multi if selection == SourceSelection.MULTI_SOURCE else not multi

    @staticmethod
    def extract_items(payload: Any) -> List[Dict[str, Any]]:
        """제공자 응답에서 shopping_results 추출

        목록이 없거나 형식이 잘못되면 빈 목록을 반환합니다.
        dict 가 아닌 항목은 버립니다.
        """
        if not isinstance(payload, Mapping):
            return []
        items = payload.get("shopping_results")
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, Mapping)]

    @staticmethod
    def select(items: Iterable[Mapping[str, Any]], selection: SourceSelection) -> List[Dict[str, Any]]:
        return [item for item in items if SelectionStrategy.matches(item, selection)]

    @staticmethod
    def partition(items: Iterable[Mapping[str, Any]]) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """(multi_source, single_source) 로 분할 - 서로소이며 합치면 원래 목록"""
        multi: List[Dict[str, Any]] = []
        single: List[Dict[str, Any]] = []
        for item in items:
            (multi if SelectionStrategy.is_multi_source(item) else single).append(item)
        return multi, single
