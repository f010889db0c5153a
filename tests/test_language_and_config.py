"""Tests for the language code map and settings."""
from __future__ import annotations

import sys

import pytest

from bing_translator.core.config import AppSettings, LogLevel, get_user_config_dir
from bing_translator.core.domain.language import BING_LANG_CODES, LANGUAGE_CODES, LanguageCodeMap


class TestLanguageCodeMap:
    """Tests for LanguageCodeMap."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("en", "en"),
            ("zh-CN", "zh-Hans"),
            ("zh-TW", "zh-Hant"),
            ("tl", "fil"),
            ("sr", "sr-Latn"),
            ("bs", "bs-Latn"),
            ("no", "nb"),
        ],
    )
    def test_translate_mapped(self, code, expected):
        assert LANGUAGE_CODES.supports(code)
        assert LANGUAGE_CODES.translate(code) == expected

    @pytest.mark.parametrize("code", ["xx", "", "ZH-cn", "klingon"])
    def test_unmapped_falls_back_to_identity(self, code):
        assert not LANGUAGE_CODES.supports(code)
        assert LANGUAGE_CODES.translate(code) == code

    def test_iterates_pairs(self):
        assert dict(LANGUAGE_CODES) == dict(BING_LANG_CODES)
        assert len(LANGUAGE_CODES) == len(BING_LANG_CODES)

    def test_custom_table(self):
        codes = LanguageCodeMap({"kl": "tlh-Latn"})
        assert codes.supports("kl")
        assert not codes.supports("en")
        assert codes.translate("kl") == "tlh-Latn"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BING_LANG_CODES["xx"] = "xx"  # type: ignore[index]


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.translator_url == "https://www.bing.com/translator"
        assert settings.http_timeout_seconds == 20.0
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BING_TRANSLATOR_TRANSLATOR_URL", "https://cn.bing.com/translator")
        monkeypatch.setenv("BING_TRANSLATOR_HTTP_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("BING_TRANSLATOR_SESSION_CACHE_PATH", str(tmp_path / "s.json"))

        settings = AppSettings(_env_file=None)

        assert settings.translator_url == "https://cn.bing.com/translator"
        assert settings.http_timeout_seconds == 5.0
        assert settings.resolved_session_cache_path() == tmp_path / "s.json"

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            AppSettings(_env_file=None, http_timeout_seconds=0)

    def test_default_cache_path_in_user_config_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_user_config_dir() == tmp_path / "bing-translator"
        settings = AppSettings(_env_file=None)
        assert settings.resolved_session_cache_path() == tmp_path / "bing-translator" / "session.json"

    def test_log_level_from_env_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("BING_TRANSLATOR_LOG_LEVEL", "debug")

        assert AppSettings(_env_file=None).log_level is LogLevel.DEBUG

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError):
            AppSettings(_env_file=None, log_level="verbose")
