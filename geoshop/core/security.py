"""입력 보안 검증"""
from typing import Any, Optional

from geoshop.core.exceptions import MissingFieldsException, ValidationException
from geoshop.core.logging import get_component_logger, sanitize_for_log

logger = get_component_logger("SECURITY")


class SecurityValidator:
    """입력 보안 검증

    원격 API 호출 전에 사용자 입력을 검사합니다.
    검증 실패 시 ValidationException 을 던지며, 이 단계에서는 어떤 원격 호출도 일어나지 않습니다.
    """

    MAX_QUERY_LENGTH = 500
    MAX_PRODUCT_ID_LENGTH = 100
    # 제어 문자 (헤더/로그 주입 방지)
    FORBIDDEN_CHARS = ['\0', '\r', '\n']
    # 오류 메시지용 필드 표시명
    FIELD_LABELS = {"product_id": "product ID"}

    @staticmethod
    def require(**fields: Any) -> None:
        """모든 필드가 비어있지 않은지 확인

        Raises:
            MissingFieldsException: 하나라도 비어있는 경우 (모든 이름을 함께 보고)
        """
        missing = [
            name for name, value in fields.items()
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise MissingFieldsException(list(fields.keys()), labels=SecurityValidator.FIELD_LABELS)

    @staticmethod
    def validate_query(query: Optional[str]) -> str:
        """검색어 검증

        Returns:
            앞뒤 공백을 제거한 검색어

        Raises:
            ValidationException: 유효하지 않은 입력
        """
        if not isinstance(query, str) or not query.strip():
            raise ValidationException("query", "must be a non-empty string")

        if len(query) > SecurityValidator.MAX_QUERY_LENGTH:
            raise ValidationException(
                "query", f"must be at most {SecurityValidator.MAX_QUERY_LENGTH} characters"
            )

        for char in SecurityValidator.FORBIDDEN_CHARS:
            if char in query:
                logger.warning(f"Control character in query: {sanitize_for_log(repr(char))}")
                raise ValidationException("query", "contains forbidden control characters")

        return query.strip()

    @staticmethod
    def validate_product_id(product_id: Optional[str]) -> str:
        """상품 ID 검증"""
        if not isinstance(product_id, str) or not product_id.strip():
            raise ValidationException("productId", "must be a non-empty string")

        if len(product_id) > SecurityValidator.MAX_PRODUCT_ID_LENGTH:
            raise ValidationException(
                "productId", f"must be at most {SecurityValidator.MAX_PRODUCT_ID_LENGTH} characters"
            )

        if any(char.isspace() for char in product_id.strip()):
            raise ValidationException("productId", "must not contain whitespace")

        return product_id.strip()
