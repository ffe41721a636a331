"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class GeoShopException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""

    status_code: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외
class ValidationException(GeoShopException):
    """유효성 검증 예외 (HTTP 400)"""

    status_code = 400

    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None,
                 error_code: str = "VALIDATION_ERROR", message: Optional[str] = None):
        message = message or f"Validation failed for '{field}': {reason}"
        super().__init__(message, error_code,
                         details or {"field": field, "reason": reason})


class MissingFieldsException(ValidationException):
    """필수 필드 누락"""
    def __init__(self, fields: list[str], details: Optional[dict[str, Any]] = None,
                 labels: Optional[dict[str, str]] = None):
        labels = labels or {}
        joined = " and ".join(labels.get(name, name) for name in fields)
        verb = "are" if len(fields) > 1 else "is"
        super().__init__(joined, "required", details or {"fields": fields},
                         message=f"{joined[:1].upper()}{joined[1:]} {verb} required")


class InvalidMarketException(ValidationException):
    """레지스트리에 없는 geolocation 코드"""
    def __init__(self, code: Optional[str], details: Optional[dict[str, Any]] = None):
        super().__init__("geolocation", f"unknown market code: {code!r}",
                         details or {"geolocation": code},
                         error_code="INVALID_GEOLOCATION", message="Invalid geolocation")


# 외부 제공자(원격 API) 관련 예외
class ProviderException(GeoShopException):
    """원격 제공자 호출 실패의 기본 클래스"""

    status_code = 502

    def __init__(self, provider: str, message: str, status: Optional[int] = None,
                 payload: Any = None, error_code: str = "PROVIDER_ERROR"):
        self.provider = provider
        self.status = status
        self.payload = payload
        details: dict[str, Any] = {"provider": provider}
        if status is not None:
            details["status"] = status
        if payload is not None:
            details["payload"] = payload
        super().__init__(message, error_code, details)


class TranslationProviderException(ProviderException):
    """번역 API 오류 - 번역기 내부에서만 처리되고 호출자에게 노출되지 않음"""
    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__("deepseek", message, status, payload, "TRANSLATION_PROVIDER_ERROR")


class ShoppingProviderException(ProviderException):
    """쇼핑 검색 API 오류"""
    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__("serpapi", message, status, payload, "SHOPPING_PROVIDER_ERROR")


# 검색 / 내보내기 실패
class SearchFailedException(GeoShopException):
    """검색 실패 (HTTP 500) - 제공자 응답 본문 또는 메시지를 details로 전달"""

    status_code = 500

    def __init__(self, operation: str, reason: Any, details: Optional[dict[str, Any]] = None):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed", "SEARCH_FAILED",
                         details or {"details": reason})


class ExportFailedException(GeoShopException):
    """엑셀 내보내기 실패 (HTTP 500)"""

    status_code = 500

    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("Failed to export Excel file", "EXPORT_FAILED",
                         details or {"reason": reason})
