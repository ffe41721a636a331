"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진/네트워크 의존 없음
"""

from .api_payloads import API_PAYLOADS, BUFFER_ROWS
from .shopping_results import (
    ITEM_WITH_SELLERS,
    MULTI_SOURCE_ITEM,
    NO_FLAG_ITEM,
    PRODUCT_DETAILS_PAYLOAD,
    SHOPPING_PAYLOAD,
    SINGLE_SOURCE_ITEM,
)

__all__ = [
    "API_PAYLOADS",
    "BUFFER_ROWS",
    "ITEM_WITH_SELLERS",
    "MULTI_SOURCE_ITEM",
    "NO_FLAG_ITEM",
    "PRODUCT_DETAILS_PAYLOAD",
    "SHOPPING_PAYLOAD",
    "SINGLE_SOURCE_ITEM",
]
