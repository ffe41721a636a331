"""Engine Results - Standardized Result Format

번역 시도(tagged result), 번역 결과, 검색 결과 세트를 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .markets import Market


class TranslationStatus(str, Enum):
    """번역 전략 실행 결과 상태"""

    TRANSLATED = "translated"  # 번역 텍스트 생성
    UNAVAILABLE = "unavailable"  # 전략을 쓸 수 없음 (키 없음, 번역표 미스)
    FAILED = "failed"  # 시도했으나 실패 (전송 오류, 빈 응답)


@dataclass(frozen=True)
class TranslationAttempt:
    """번역 전략 하나의 실행 결과

    Attributes:
        strategy: 전략 이름 ("remote" | "lookup" | "passthrough")
        status: 결과 상태
        text: 번역 텍스트 (TRANSLATED 일 때만)
        reason: 실패/사용 불가 사유
    """

    strategy: str
    status: TranslationStatus
    text: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == TranslationStatus.TRANSLATED and bool(self.text)

    @classmethod
    def translated(cls, strategy: str, text: str) -> "TranslationAttempt":
        return cls(strategy=strategy, status=TranslationStatus.TRANSLATED, text=text)

    @classmethod
    def unavailable(cls, strategy: str, reason: str) -> "TranslationAttempt":
        return cls(strategy=strategy, status=TranslationStatus.UNAVAILABLE, reason=reason)

    @classmethod
    def failed(cls, strategy: str, reason: str) -> "TranslationAttempt":
        return cls(strategy=strategy, status=TranslationStatus.FAILED, reason=reason)


@dataclass(frozen=True)
class TranslationResult:
    """번역 결과

    translated_query 는 항상 값이 있습니다 (번역 실패 시 original_query).
    """

    original_query: str
    translated_query: str
    target_language: str
    source: str = "passthrough"
    attempts: Tuple[TranslationAttempt, ...] = ()

    @property
    def was_translated(self) -> bool:
        return self.source != "passthrough"


@dataclass
class ResultSet:
    """시장별 쇼핑 검색 결과

    results 는 제공자가 돌려준 상품 dict 를 그대로 담습니다 (필터링만 적용).
    """

    market: Market
    original_query: str
    translated_query: str
    results: List[Dict[str, Any]] = field(default_factory=list)
    translation: Optional[TranslationResult] = None

    @property
    def geolocation(self) -> str:
        return self.market.code

    @property
    def total_results(self) -> int:
        return len(self.results)


@dataclass
class ProductDetails:
    """상품 상세 조회 결과 (제공자 원본 payload + 시장 정보)"""

    market: Market
    product_id: str
    payload: Dict[str, Any] = field(default_factory=dict)
