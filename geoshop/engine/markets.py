"""Market Registry - 지원 시장(국가/언어) 정의

Google Shopping API 가 지원하는 유럽 시장만 등록합니다.
레지스트리는 프로세스 시작 시 고정되며 이후 변경되지 않습니다.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from geoshop.core.exceptions import InvalidMarketException


@dataclass(frozen=True)
class Market:
    """시장 정보

    Attributes:
        code: 시장 코드 (SerpAPI gl 파라미터로도 사용)
        display_name: 국가 표시명
        flag_glyph: 국기 이모지
        language_code: 번역 대상 언어 코드
    """

    code: str
    display_name: str
    flag_glyph: str
    language_code: str

    def as_geo_info(self) -> Dict[str, str]:
        """API 응답용 표현 ({name, flag, language})"""
        return {
            "name": self.display_name,
            "flag": self.flag_glyph,
            "language": self.language_code,
        }


DEFAULT_MARKETS = (
    Market("sk", "Slovakia", "🇸🇰", "sk"),
    Market("cz", "Czech Republic", "🇨🇿", "cs"),
    Market("hu", "Hungary", "🇭🇺", "hu"),
    Market("ro", "Romania", "🇷🇴", "ro"),
    Market("gr", "Greece", "🇬🇷", "el"),
    Market("it", "Italy", "🇮🇹", "it"),
    Market("de", "Germany", "🇩🇪", "de"),
    Market("at", "Austria", "🇦🇹", "de"),
    Market("pl", "Poland", "🇵🇱", "pl"),
)


class MarketRegistry:
    """시장 코드 → Market 조회

    유효한 시장 코드의 유일한 출처입니다. 읽기 전용이므로 잠금이 필요 없습니다.
    """

    def __init__(self, markets=DEFAULT_MARKETS):
        by_code: Dict[str, Market] = {}
        for market in markets:
            if market.code in by_code:
                raise ValueError(f"Duplicate market code: {market.code}")
            if not market.language_code:
                raise ValueError(f"Market {market.code} has no language code")
            by_code[market.code] = market
        self._markets: Mapping[str, Market] = MappingProxyType(by_code)

    def lookup(self, code: Optional[str]) -> Optional[Market]:
        """시장 조회 (없으면 None)"""
        if not code or not isinstance(code, str):
            return None
        return self._markets.get(code)

    def require(self, code: Optional[str]) -> Market:
        """시장 조회 (없으면 InvalidMarketException)"""
        market = self.lookup(code)
        if market is None:
            raise InvalidMarketException(code)
        return market

    def codes(self) -> list[str]:
        return list(self._markets.keys())

    def as_geo_map(self) -> Dict[str, Dict[str, str]]:
        """GET /api/geolocations 응답 형태"""
        return {code: market.as_geo_info() for code, market in self._markets.items()}

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._markets

    def __iter__(self) -> Iterator[Market]:
        return iter(self._markets.values())

    def __len__(self) -> int:
        return len(self._markets)
