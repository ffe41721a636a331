"""검색어 텍스트 처리 유틸리티"""
import re

_WHITESPACE_RE = re.compile(r"\s+")
_QUOTE_PAIRS = {'"': '"', "'": "'", "“": "”", "„": "“", "«": "»"}


def normalize_lookup_key(text: str) -> str:
    """번역표 조회용 키: 대소문자 통일 + 공백 정리"""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip().casefold()


def strip_wrapping_quotes(text: str) -> str:
    """모델이 되돌려준 '"번역"' 형태의 바깥 따옴표 제거"""
    result = (text or "").strip()
    while len(result) >= 2 and _QUOTE_PAIRS.get(result[0]) == result[-1]:
        result = result[1:-1].strip()
    return result
