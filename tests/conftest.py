"""
Pytest fixtures for the Bing Translator plugin.

HTTP never leaves the process: see `fakes.FakeBing`.
"""

from __future__ import annotations

import pytest

from bing_translator.core.config import AppSettings
from fakes import FakeBing


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from any `.env` file on the machine."""

    return AppSettings(
        _env_file=None,
        translator_url="https://www.bing.com/translator",
        session_cache_path=tmp_path / "session.json",
        source_icon_url="https://www.bing.com/favicon.ico",
    )


@pytest.fixture
def fake_bing():
    return FakeBing()
