"""DeepSeek chat-completions 번역 클라이언트"""

from __future__ import annotations

from typing import Any, Dict

import httpx

from geoshop.core.exceptions import TranslationProviderException

from .http_client import SharedHttpClient, error_payload


class DeepSeekClient:
    """원격 번역 기능 구현 (TranslationCapability)

    모든 전송/응답 오류는 TranslationProviderException 으로 변환합니다.
    """

    def __init__(
        self,
        http: SharedHttpClient,
        *,
        api_key: str,
        api_url: str,
        model: str = "deepseek-chat",
        temperature: float = 0.3,
        max_tokens: int = 100,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must not be empty")
        self.http = http
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def build_request(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """번역 요청

        Returns:
            모델 응답 텍스트 (trim)

        Raises:
            TranslationProviderException: 전송 오류, non-2xx, 응답 형식 오류
        """
        try:
            response = await self.http.post_json(
                self.api_url,
                json=self.build_request(system_prompt, user_prompt),
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        except httpx.HTTPError as e:
            raise TranslationProviderException(f"{type(e).__name__}: {e}") from e

        if response.is_error:
            raise TranslationProviderException(
                f"DeepSeek returned HTTP {response.status_code}",
                status=response.status_code,
                payload=error_payload(response),
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise TranslationProviderException(
                f"Malformed DeepSeek response: {type(e).__name__}",
                status=response.status_code,
            ) from e

        if not isinstance(content, str):
            raise TranslationProviderException("DeepSeek response content is not text")
        return content.strip()
