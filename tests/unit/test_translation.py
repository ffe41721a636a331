"""Query Translator 테스트 - Remote → Lookup → Passthrough 체인."""

from __future__ import annotations

import pytest

from geoshop.core.exceptions import TranslationProviderException
from geoshop.engine import (
    LookupTableStrategy,
    PassthroughStrategy,
    QueryTranslator,
    RemoteTranslationStrategy,
    TranslationAttempt,
    TranslationStatus,
)
from geoshop.engine.translation import build_prompts
from tests.stubs import StubTranslationCapability


class ExplodingStrategy:
    name = "exploding"

    async def translate(self, query, market):
        raise RuntimeError("boom")


class TestDefaultChainWithoutRemote:
    @pytest.mark.asyncio
    async def test_laptop_to_slovak_from_table(self, market_sk):
        translator = QueryTranslator.default(None)

        result = await translator.translate("laptop", market_sk)

        assert result.translated_query == "notebook"
        assert result.original_query == "laptop"
        assert result.target_language == "sk"
        assert result.source == "lookup"

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self, market_sk):
        translator = QueryTranslator.default(None)

        result = await translator.translate("  LapTop ", market_sk)

        assert result.translated_query == "notebook"

    @pytest.mark.asyncio
    async def test_unknown_query_passes_through(self, market_sk):
        translator = QueryTranslator.default(None)

        result = await translator.translate("gaming chair", market_sk)

        assert result.translated_query == "gaming chair"
        assert result.source == "passthrough"
        assert not result.was_translated
        statuses = [attempt.status for attempt in result.attempts]
        assert statuses == [
            TranslationStatus.UNAVAILABLE,
            TranslationStatus.UNAVAILABLE,
            TranslationStatus.TRANSLATED,
        ]

    @pytest.mark.asyncio
    async def test_phrase_without_target_language_passes_through(self, registry):
        """번역표에 'el' 항목이 없는 경우"""
        translator = QueryTranslator.default(None)

        result = await translator.translate("laptop", registry.require("gr"))

        assert result.translated_query == "laptop"
        assert result.source == "passthrough"


class TestRemoteStrategy:
    @pytest.mark.asyncio
    async def test_remote_success_short_circuits(self, market_sk):
        capability = StubTranslationCapability(reply='"prenosný počítač"')
        translator = QueryTranslator.default(capability)

        result = await translator.translate("laptop", market_sk)

        assert result.translated_query == "prenosný počítač"
        assert result.source == "remote"
        assert len(result.attempts) == 1
        assert len(capability.prompts) == 1

    @pytest.mark.asyncio
    async def test_remote_error_falls_back_to_table(self, market_sk):
        capability = StubTranslationCapability(
            error=TranslationProviderException("HTTP 500", status=500, payload={"error": "x"})
        )
        translator = QueryTranslator.default(capability)

        result = await translator.translate("laptop", market_sk)

        assert result.translated_query == "notebook"
        assert result.attempts[0].status == TranslationStatus.FAILED
        assert result.attempts[0].reason == "HTTP 500"

    @pytest.mark.asyncio
    async def test_remote_empty_reply_is_failure(self, market_sk):
        translator = QueryTranslator.default(StubTranslationCapability(reply="   "))

        result = await translator.translate("stolička", market_sk)

        assert result.translated_query == "stolička"
        assert result.attempts[0].status == TranslationStatus.FAILED

    @pytest.mark.asyncio
    async def test_unconfigured_remote_is_unavailable(self, market_sk):
        attempt = await RemoteTranslationStrategy(None).translate("laptop", market_sk)

        assert attempt.status == TranslationStatus.UNAVAILABLE
        assert not attempt.is_success

    def test_prompts_carry_language_and_country(self, registry):
        system_prompt, user_prompt = build_prompts("laptop", registry.require("cz"))

        assert "to cs language for Czech Republic" in system_prompt
        assert "Keep product names and brands" in system_prompt
        assert user_prompt == 'Translate this shopping search query: "laptop"'


class TestChainGuarantees:
    @pytest.mark.asyncio
    async def test_raising_strategy_does_not_escape(self, market_sk):
        translator = QueryTranslator([ExplodingStrategy(), PassthroughStrategy()])

        result = await translator.translate("laptop", market_sk)

        assert result.translated_query == "laptop"
        assert result.attempts[0].status == TranslationStatus.FAILED
        assert "RuntimeError" in (result.attempts[0].reason or "")

    @pytest.mark.asyncio
    async def test_chain_without_passthrough_still_returns_query(self, market_sk):
        translator = QueryTranslator([LookupTableStrategy({})])

        result = await translator.translate("laptop", market_sk)

        assert result.translated_query == "laptop"
        assert result.source == "passthrough"

    @pytest.mark.asyncio
    async def test_custom_table(self, market_sk):
        table = {"chair": {"sk": "stolička"}}
        attempt = await LookupTableStrategy(table).translate("Chair", market_sk)

        assert attempt == TranslationAttempt.translated("lookup", "stolička")

    def test_empty_chain_rejected(self):
        with pytest.raises(ValueError):
            QueryTranslator([])
