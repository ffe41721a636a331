"""리소스 파일(YAML) 로더 유틸리티"""
import os
from functools import lru_cache
from typing import Any, Dict

import yaml

from geoshop.core.logging import get_component_logger
from geoshop.utils.text_utils import normalize_lookup_key

logger = get_component_logger("RESOURCE")


def get_resource_path(relative_path: str) -> str:
    """패키지 리소스 디렉터리 기준 절대 경로 반환"""
    # geoshop/utils/resource_loader.py -> geoshop/utils -> geoshop
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


def load_translation_table(relative_path: str = "translations.yaml") -> Dict[str, Dict[str, str]]:
    """로컬 번역표 로드

    Returns:
        {정규화된 검색어: {언어 코드: 번역}}
    """
    data = load_yaml_resource(relative_path)
    phrases = data.get("phrases") or {}

    table: Dict[str, Dict[str, str]] = {}
    for phrase, translations in phrases.items():
        if not isinstance(translations, dict):
            logger.warning(f"Skipping malformed translation entry: {phrase!r}")
            continue
        table[normalize_lookup_key(str(phrase))] = {
            str(lang): str(text) for lang, text in translations.items() if text
        }
    return table
