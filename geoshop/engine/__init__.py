"""Engine Layer - Core Orchestration

This module provides the core engine layer:
- MarketRegistry: 지원 시장 정의
- QueryTranslator: Remote → Lookup → Passthrough 번역 체인
- SearchOrchestrator: 번역 → 검색 → 판매처 수 필터링
- SelectionStrategy: multi/single source 분할 규칙
- Results: TranslationAttempt / TranslationResult / ResultSet / ProductDetails
"""

from .markets import DEFAULT_MARKETS, Market, MarketRegistry
from .orchestrator import SearchOrchestrator
from .result import (
    ProductDetails,
    ResultSet,
    TranslationAttempt,
    TranslationResult,
    TranslationStatus,
)
from .strategy import SelectionStrategy, SourceSelection
from .translation import (
    LookupTableStrategy,
    PassthroughStrategy,
    QueryTranslator,
    RemoteTranslationStrategy,
)

__all__ = [
    "DEFAULT_MARKETS",
    "Market",
    "MarketRegistry",
    "SearchOrchestrator",
    "SelectionStrategy",
    "SourceSelection",
    "QueryTranslator",
    "RemoteTranslationStrategy",
    "LookupTableStrategy",
    "PassthroughStrategy",
    "TranslationAttempt",
    "TranslationResult",
    "TranslationStatus",
    "ResultSet",
    "ProductDetails",
]
