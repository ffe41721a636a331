"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# .env.example 에 들어있는 자리표시자 키는 미설정으로 취급
PLACEHOLDER_KEYS = frozenset({
    "your_deepseek_api_key_here",
    "your_serpapi_key_here",
})


def is_placeholder_key(value: str) -> bool:
    """API 키가 비어있거나 자리표시자인지 확인"""
    if not value or not value.strip():
        return True
    key = value.strip()
    if key in PLACEHOLDER_KEYS:
        return True
    return key.startswith("your_") and key.endswith("_here")


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # 번역 (DeepSeek)
    deepseek_api_key: str = ""
    deepseek_api_url: str = "https://api.deepseek.com/v1/chat/completions"
    deepseek_model: str = "deepseek-chat"
    deepseek_temperature: float = 0.3
    deepseek_max_tokens: int = 100

    # 쇼핑 검색 (SerpAPI)
    serpapi_key: str = ""
    serpapi_url: str = "https://serpapi.com/search"
    # 검색 결과 UI 언어 (hl) - 시장과 무관하게 고정
    search_ui_language: str = "en"

    # HTTP
    http_timeout_s: float = 30.0

    # 서버
    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: List[str] = ["*"]

    # API
    api_title: str = "Multi-Geo Shopping Search"
    api_version: str = "1.0.0"
    api_description: str = "검색어를 시장 언어로 번역하고 Google Shopping 결과를 판매처 수로 필터링합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("http_timeout_s")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_s must be positive")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("deepseek_temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("deepseek_temperature must be between 0 and 2")
        return v

    @field_validator("deepseek_max_tokens")
    @classmethod
    def validate_max_tokens(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("deepseek_max_tokens must be positive")
        return v

    @property
    def translation_enabled(self) -> bool:
        """원격 번역 사용 가능 여부"""
        return not is_placeholder_key(self.deepseek_api_key)

    @property
    def search_enabled(self) -> bool:
        """SerpAPI 키 설정 여부"""
        return not is_placeholder_key(self.serpapi_key)


settings = Settings()
