"""Query Translator - 순서가 있는 번역 전략 체인

Remote(DeepSeek) → Lookup(고정 번역표) → Passthrough 순서로 시도합니다.
각 전략은 TranslationAttempt 를 반환하며, 첫 번째 TRANSLATED 결과를 사용합니다.
translate() 는 절대 예외를 던지지 않습니다.
"""

from typing import Mapping, Optional, Sequence

from geoshop.core.exceptions import TranslationProviderException
from geoshop.core.logging import get_component_logger, sanitize_for_log
from geoshop.utils.resource_loader import load_translation_table
from geoshop.utils.text_utils import normalize_lookup_key, strip_wrapping_quotes

from .markets import Market
from .result import TranslationAttempt, TranslationResult
from .strategy import TranslationCapability, TranslationStrategy

logger = get_component_logger("TRANSLATE")


SYSTEM_PROMPT_TEMPLATE = (
    "You are a professional translator specializing in e-commerce and product search queries. "
    "Translate the given search query to {language} language for {country}.\n"
    "\n"
    "Rules:\n"
    "1. Only return the translated text, no explanations\n"
    "2. Keep product names and brands in their original form if commonly used\n"
    "3. Adapt the query for local shopping context\n"
    "4. If the query is already in the target language, return it as is\n"
    "5. For technical terms, use the most commonly used local equivalent"
)

USER_PROMPT_TEMPLATE = 'Translate this shopping search query: "{query}"'


def build_prompts(query: str, market: Market) -> tuple[str, str]:
    """원격 번역용 (system, user) 프롬프트"""
    system_prompt = SYSTEM_PROMPT_TEMPLATE.format(
        language=market.language_code, country=market.display_name
    )
    return system_prompt, USER_PROMPT_TEMPLATE.format(query=query)


class RemoteTranslationStrategy:
    """원격 번역 API 전략

    capability 가 None 이면 (키 미설정/자리표시자) UNAVAILABLE 을 반환합니다.
    """

    name = "remote"

    def __init__(self, capability: Optional[TranslationCapability]):
        self.capability = capability

    async def translate(self, query: str, market: Market) -> TranslationAttempt:
        if self.capability is None:
            return TranslationAttempt.unavailable(self.name, "translation API key not configured")

        system_prompt, user_prompt = build_prompts(query, market)
        try:
            text = await self.capability.complete(system_prompt, user_prompt)
        except TranslationProviderException as e:
            logger.warning(f"Remote translation error: {e.details.get('payload') or e.message}")
            return TranslationAttempt.failed(self.name, e.message)

        text = strip_wrapping_quotes(text)
        if not text:
            return TranslationAttempt.failed(self.name, "empty translation")

        logger.info(
            f"Remote translation: '{sanitize_for_log(query)}' -> "
            f"'{sanitize_for_log(text)}' ({market.language_code})"
        )
        return TranslationAttempt.translated(self.name, text)


class LookupTableStrategy:
    """고정 번역표 조회 전략"""

    name = "lookup"

    def __init__(self, table: Optional[Mapping[str, Mapping[str, str]]] = None):
        self.table = load_translation_table() if table is None else table

    async def translate(self, query: str, market: Market) -> TranslationAttempt:
        entry = self.table.get(normalize_lookup_key(query))
        if not entry:
            return TranslationAttempt.unavailable(self.name, "phrase not in table")

        text = entry.get(market.language_code)
        if not text:
            return TranslationAttempt.unavailable(
                self.name, f"no '{market.language_code}' entry for phrase"
            )
        return TranslationAttempt.translated(self.name, text)


class PassthroughStrategy:
    """원문 그대로 반환 (체인의 마지막 단계)"""

    name = "passthrough"

    async def translate(self, query: str, market: Market) -> TranslationAttempt:
        return TranslationAttempt.translated(self.name, query)


class QueryTranslator:
    """번역 전략 체인 실행기"""

    def __init__(self, strategies: Sequence[TranslationStrategy]):
        if not strategies:
            raise ValueError("at least one translation strategy is required")
        self.strategies = tuple(strategies)

    @classmethod
    def default(cls, capability: Optional[TranslationCapability] = None,
                table: Optional[Mapping[str, Mapping[str, str]]] = None) -> "QueryTranslator":
        """Remote → Lookup → Passthrough 기본 체인"""
        return cls([
            RemoteTranslationStrategy(capability),
            LookupTableStrategy(table),
            PassthroughStrategy(),
        ])

    async def translate(self, query: str, market: Market) -> TranslationResult:
        attempts: list[TranslationAttempt] = []

        for strategy in self.strategies:
            try:
                attempt = await strategy.translate(query, market)
            except Exception as e:
                # 전략 구현 버그도 체인을 끊지 않음
                logger.error(
                    f"Strategy '{strategy.name}' raised {type(e).__name__}: {e}",
                    exc_info=True,
                )
                attempt = TranslationAttempt.failed(strategy.name, f"{type(e).__name__}: {e}")

            attempts.append(attempt)
            if attempt.is_success:
                return TranslationResult(
                    original_query=query,
                    translated_query=attempt.text or query,
                    target_language=market.language_code,
                    source=attempt.strategy,
                    attempts=tuple(attempts),
                )
            logger.debug(
                f"{attempt.strategy} {attempt.status.value}: {attempt.reason}"
            )

        return TranslationResult(
            original_query=query,
            translated_query=query,
            target_language=market.language_code,
            source="passthrough",
            attempts=tuple(attempts),
        )
