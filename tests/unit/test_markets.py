"""Market Registry 테스트."""

from __future__ import annotations

import pytest

from geoshop.core.exceptions import InvalidMarketException, ValidationException
from geoshop.engine import DEFAULT_MARKETS, Market, MarketRegistry


class TestMarketRegistry:
    @pytest.mark.parametrize("code", [market.code for market in DEFAULT_MARKETS])
    def test_every_registered_code_has_language(self, registry, code):
        market = registry.lookup(code)

        assert market is not None
        assert market.code == code
        assert market.language_code

    @pytest.mark.parametrize("code", ["xx", "", None, "SK", "gb", 42])
    def test_unknown_codes_not_found(self, registry, code):
        assert registry.lookup(code) is None

    def test_require_raises_invalid_market(self, registry):
        with pytest.raises(InvalidMarketException) as exc_info:
            registry.require("xx")

        assert isinstance(exc_info.value, ValidationException)
        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == "INVALID_GEOLOCATION"
        assert exc_info.value.message == "Invalid geolocation"

    def test_language_mapping(self, registry):
        """국가 코드와 언어 코드가 다른 시장"""
        assert registry.require("cz").language_code == "cs"
        assert registry.require("gr").language_code == "el"
        assert registry.require("at").language_code == "de"

    def test_geo_map_shape(self, registry):
        geo_map = registry.as_geo_map()

        assert len(geo_map) == 9
        assert geo_map["sk"] == {"name": "Slovakia", "flag": "🇸🇰", "language": "sk"}
        assert set(geo_map) == set(registry.codes())

    def test_contains_and_len(self, registry):
        assert "de" in registry
        assert "xx" not in registry
        assert len(registry) == len(DEFAULT_MARKETS)

    def test_duplicate_codes_rejected(self):
        with pytest.raises(ValueError):
            MarketRegistry([Market("sk", "A", "", "sk"), Market("sk", "B", "", "sk")])

    def test_market_is_immutable(self, market_sk):
        with pytest.raises(AttributeError):
            market_sk.language_code = "en"  # type: ignore[misc]
