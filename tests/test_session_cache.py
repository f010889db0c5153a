"""Tests for the two-key session cache and its JSON file store."""
from __future__ import annotations

import json

import pytest

from bing_translator.adapters.session_cache import (
    DOMAIN_KEY,
    TOKEN_KEY,
    JsonFileStore,
    SessionCache,
    open_session_cache,
)
from bing_translator.core.domain.models import SessionContext


class TestSessionCache:
    """Tests for SessionCache over a plain dict."""

    def test_round_trip(self):
        cache = SessionCache({})
        cache.save(SessionContext(domain="cn.bing.com", token="ABC123"))

        assert cache.load() == SessionContext(domain="cn.bing.com", token="ABC123")

    def test_empty_store_is_a_miss(self):
        assert SessionCache({}).load() is None

    @pytest.mark.parametrize(
        "store",
        [
            {DOMAIN_KEY: "cn.bing.com"},
            {TOKEN_KEY: "ABC123"},
            {DOMAIN_KEY: "", TOKEN_KEY: "ABC123"},
            {DOMAIN_KEY: "cn.bing.com", TOKEN_KEY: ""},
        ],
    )
    def test_partial_pair_is_a_miss(self, store):
        """Both keys must be present and non-empty."""
        assert SessionCache(store).load() is None

    def test_save_overwrites_both_keys(self):
        store: dict[str, str] = {}
        cache = SessionCache(store)
        cache.save(SessionContext(domain="www.bing.com", token="OLD"))
        cache.save(SessionContext(domain="cn.bing.com", token="NEW"))

        assert store == {DOMAIN_KEY: "cn.bing.com", TOKEN_KEY: "NEW"}

    def test_clear_removes_pair_only(self):
        store = {DOMAIN_KEY: "cn.bing.com", TOKEN_KEY: "ABC123", "other": "kept"}
        cache = SessionCache(store)

        cache.clear()
        cache.clear()

        assert cache.load() is None
        assert store == {"other": "kept"}


class TestJsonFileStore:
    """Tests for the persistent store."""

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "session.json"
        SessionCache(JsonFileStore(path)).save(SessionContext(domain="cn.bing.com", token="ABC123"))

        reloaded = SessionCache(JsonFileStore(path)).load()

        assert reloaded == SessionContext(domain="cn.bing.com", token="ABC123")
        assert json.loads(path.read_text(encoding="utf-8")) == {
            DOMAIN_KEY: "cn.bing.com",
            TOKEN_KEY: "ABC123",
        }

    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileStore(tmp_path / "absent.json")
        assert len(store) == 0
        assert not (tmp_path / "absent.json").exists()

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"bing_translator.domain": 42}'])
    def test_unreadable_file_is_empty(self, tmp_path, content):
        path = tmp_path / "session.json"
        path.write_text(content, encoding="utf-8")

        assert SessionCache(JsonFileStore(path)).load() is None

    def test_delete_is_persisted(self, tmp_path):
        path = tmp_path / "session.json"
        store = JsonFileStore(path)
        store["a"] = "1"
        store["b"] = "2"
        del store["a"]

        assert dict(JsonFileStore(path)) == {"b": "2"}

    def test_open_session_cache_uses_settings_path(self, settings):
        open_session_cache(settings).save(SessionContext(domain="www.bing.com", token="T0KEN"))

        assert settings.resolved_session_cache_path().exists()
        assert open_session_cache(settings).load() == SessionContext(domain="www.bing.com", token="T0KEN")

    def test_failed_write_keeps_values_in_memory(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        cache = SessionCache(JsonFileStore(blocker / "session.json"))

        cache.save(SessionContext(domain="cn.bing.com", token="ABC123"))

        assert cache.load() == SessionContext(domain="cn.bing.com", token="ABC123")
        assert "Could not write session store" in caplog.text
