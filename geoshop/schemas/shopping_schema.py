"""Pydantic 스키마 정의

JSON 필드는 camelCase (기존 프론트엔드 호환), 파이썬 속성은 snake_case 를 사용합니다.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from geoshop.engine.markets import Market
from geoshop.engine.result import ProductDetails, ResultSet, TranslationResult


class CamelModel(BaseModel):
    """camelCase 직렬화 기본 모델"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# 요청
# ============================================================================

class QueryRequest(CamelModel):
    """번역/검색 요청 - 필드 누락은 라우트에서 400 으로 보고"""
    query: Optional[str] = Field(None, max_length=2000, description="원본 검색어")
    geolocation: Optional[str] = Field(None, max_length=10, description="시장 코드 (예: sk)")


class ProductDetailsRequest(CamelModel):
    """상품 상세 요청"""
    product_id: Optional[str] = Field(None, description="Google Shopping product_id")
    geolocation: Optional[str] = Field(None, max_length=10, description="시장 코드")


class SaveMultipleRequest(CamelModel):
    """여러 행 저장 요청

    products (판매처별 행 목록) 또는 item (검색 결과 상품 하나, 서버에서 판매처별 행으로 펼침)
    중 하나를 보냅니다. products 가 우선합니다.
    """
    products: Optional[Any] = Field(None, description="BufferRecord 목록")
    item: Optional[Any] = Field(None, description="shopping_results 항목")
    geolocation: Optional[str] = Field(None, max_length=10, description="item 의 시장 코드")
    translated_query: Optional[str] = Field(None, description="item 검색에 쓰인 번역 검색어")


# ============================================================================
# 제공자 상품 (느슨한 구조)
# ============================================================================

class ShoppingSeller(BaseModel):
    """판매처 정보 - 엔진이 읽는 필드만 정의"""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    link: Optional[str] = None
    base_price: Optional[Any] = None
    shipping: Optional[Any] = None
    total_price: Optional[Any] = None


class ShoppingItem(BaseModel):
    """SerpAPI shopping_results 항목

    엔진이 읽는 필드만 정의하고 나머지는 그대로 보존합니다. 모든 필드는 선택 사항입니다.
    """
    model_config = ConfigDict(extra="allow")

    product_id: Optional[Union[str, int]] = None
    title: Optional[str] = None
    multiple_sources: Optional[Any] = None
    price: Optional[Any] = None
    extracted_price: Optional[float] = None
    source: Optional[str] = None
    product_link: Optional[str] = None
    number_of_comparisons: Optional[Any] = None
    sellers: List[ShoppingSeller] = Field(default_factory=list)

    @property
    def is_multi_source(self) -> bool:
        return self.multiple_sources is True

    @property
    def seller_count(self) -> Optional[int]:
        """판매처 수 (판매처 목록 우선, 없으면 비교 수 문자열에서 추출)"""
        if self.sellers:
            return len(self.sellers)
        if isinstance(self.number_of_comparisons, int):
            return self.number_of_comparisons
        if isinstance(self.number_of_comparisons, str):
            digits = "".join(ch for ch in self.number_of_comparisons if ch.isdigit())
            if digits:
                return int(digits)
        return 1 if self.source else None


# ============================================================================
# 버퍼 레코드 (엑셀 행)
# ============================================================================

class BufferRecord(CamelModel):
    """Result Buffer 에 저장되는 엑셀 행

    자유 형식 레코드를 받아들이며 (알 수 없는 키 보존), 저장 후에는 변경되지 않습니다.
    geolocation 은 marketCode 로도 받을 수 있습니다.
    """
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow", frozen=True
    )

    geolocation: Optional[Any] = Field(
        None, validation_alias=AliasChoices("geolocation", "marketCode", "market_code")
    )
    translated_query: Optional[Any] = None
    title: Optional[Any] = None
    product_id: Optional[Any] = None
    price_range: Optional[Any] = None
    seller_count: Optional[Any] = None
    product_link: Optional[Any] = None
    seller_name: Optional[Any] = None
    seller_link: Optional[Any] = None
    base_price: Optional[Any] = None
    shipping: Optional[Any] = None
    total_price: Optional[Any] = None
    seller_index: Optional[Any] = None
    saved_at: Optional[str] = None

    @field_validator("saved_at", mode="before")
    @classmethod
    def discard_client_saved_at(cls, v: Any) -> None:
        """저장 시각은 버퍼가 기록하므로 입력값은 버림"""
        return None

    def stamped(self, saved_at: str) -> "BufferRecord":
        """저장 시각이 찍힌 복사본"""
        return self.model_copy(update={"saved_at": saved_at})

    def to_row(self) -> Dict[str, Any]:
        """camelCase 키의 평면 dict (엑셀 컬럼 키와 동일)"""
        return self.model_dump(by_alias=True)

    @classmethod
    def rows_from_item(
        cls,
        item: Union[ShoppingItem, Dict[str, Any]],
        market_code: str,
        translated_query: str,
    ) -> List["BufferRecord"]:
        """상품 하나를 판매처별 행으로 평탄화 (판매처가 없으면 한 행)"""
        if not isinstance(item, ShoppingItem):
            item = ShoppingItem.model_validate(item)

        base = {
            "geolocation": market_code,
            "translated_query": translated_query,
            "title": item.title,
            "product_id": None if item.product_id is None else str(item.product_id),
            "price_range": item.price,
            "seller_count": item.seller_count,
            "product_link": item.product_link,
        }

        if not item.sellers:
            return [cls(
                **base,
                seller_name=item.source,
                base_price=item.price,
                total_price=item.price,
            )]

        return [
            cls(
                **base,
                seller_name=seller.name,
                seller_link=seller.link,
                base_price=seller.base_price,
                shipping=seller.shipping,
                total_price=seller.total_price,
                seller_index=index,
            )
            for index, seller in enumerate(item.sellers, start=1)
        ]


# ============================================================================
# 응답
# ============================================================================

class GeoInfo(BaseModel):
    """시장 표시 정보"""
    name: str
    flag: str
    language: str

    @classmethod
    def from_market(cls, market: Market) -> "GeoInfo":
        return cls(**market.as_geo_info())


class TranslateResponse(CamelModel):
    """번역 응답"""
    success: bool = True
    original_query: str
    translated_query: str
    target_language: str
    geolocation: GeoInfo
    translation_source: str = Field(..., description="remote | lookup | passthrough")

    @classmethod
    def from_result(cls, result: TranslationResult, market: Market) -> "TranslateResponse":
        return cls(
            original_query=result.original_query,
            translated_query=result.translated_query,
            target_language=result.target_language,
            geolocation=GeoInfo.from_market(market),
            translation_source=result.source,
        )


class SearchResponse(CamelModel):
    """검색 응답 (multi/single source 공통)"""
    success: bool = True
    geolocation: str
    geo_info: GeoInfo
    original_query: str
    translated_query: str
    results: List[Dict[str, Any]]
    total_results: int

    @classmethod
    def from_result(cls, result: ResultSet) -> "SearchResponse":
        return cls(
            geolocation=result.geolocation,
            geo_info=GeoInfo.from_market(result.market),
            original_query=result.original_query,
            translated_query=result.translated_query,
            results=result.results,
            total_results=result.total_results,
        )


class ProductDetailsResponse(CamelModel):
    """상품 상세 응답"""
    success: bool = True
    product_details: Dict[str, Any]
    geolocation: str
    geo_info: GeoInfo

    @classmethod
    def from_result(cls, result: ProductDetails) -> "ProductDetailsResponse":
        return cls(
            product_details=result.payload,
            geolocation=result.market.code,
            geo_info=GeoInfo.from_market(result.market),
        )


class SaveResponse(CamelModel):
    """버퍼 저장 응답"""
    success: bool = True
    message: str
    total_saved: int


class BufferSummaryItem(CamelModel):
    """버퍼 요약 행"""
    title: Optional[Any] = None
    geolocation: Optional[Any] = None
    saved_at: Optional[str] = None


class BufferCountResponse(CamelModel):
    """버퍼 상태 응답"""
    count: int
    data: List[BufferSummaryItem]


class ClearResponse(CamelModel):
    success: bool = True
    message: str


class ErrorResponse(CamelModel):
    """오류 응답"""
    success: bool = False
    error: str
    error_code: str
    details: Optional[Any] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    translation: str
    search: str
