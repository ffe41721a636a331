"""원격 기능 클라이언트 (번역 / 쇼핑 검색)"""

from .deepseek_client import DeepSeekClient
from .http_client import SharedHttpClient
from .serpapi_client import SerpApiClient

__all__ = ["DeepSeekClient", "SerpApiClient", "SharedHttpClient"]
