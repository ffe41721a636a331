"""설정 테스트"""
import pytest
from pydantic import ValidationError

from geoshop.core.config import Settings, is_placeholder_key


@pytest.mark.parametrize("value", ["", "   ", "your_deepseek_api_key_here", "your_serpapi_key_here", "your_other_key_here"])
def test_placeholder_keys(value):
    assert is_placeholder_key(value) is True


@pytest.mark.parametrize("value", ["sk-123", "abcdef0123456789", "your_key"])
def test_real_keys(value):
    assert is_placeholder_key(value) is False


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None, deepseek_api_key="", serpapi_key="")

        assert settings.port == 3000
        assert settings.deepseek_temperature == 0.3
        assert settings.deepseek_max_tokens == 100
        assert settings.search_ui_language == "en"
        assert settings.translation_enabled is False
        assert settings.search_enabled is False

    def test_keys_enable_features(self):
        settings = Settings(_env_file=None, deepseek_api_key="sk-live", serpapi_key="serp-live")

        assert settings.translation_enabled is True
        assert settings.search_enabled is True

    def test_placeholder_key_disables_translation(self):
        settings = Settings(_env_file=None, deepseek_api_key="your_deepseek_api_key_here")

        assert settings.translation_enabled is False

    @pytest.mark.parametrize("field, value", [
        ("port", 0),
        ("port", 70000),
        ("http_timeout_s", 0),
        ("deepseek_temperature", 2.5),
        ("deepseek_max_tokens", 0),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})
