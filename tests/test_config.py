from __future__ import annotations

import pytest

from sasato_res import __version__
from sasato_res.core.config import DEFAULT_SENSITIVE_KEYS, Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEBUG_MODE", "API_VERSION", "SENSITIVE_KEYS", "MASK"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.DEBUG_MODE is False
    assert s.API_VERSION == __version__
    assert tuple(s.SENSITIVE_KEYS) == DEFAULT_SENSITIVE_KEYS
    assert s.MASK == "********"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG_MODE", "true")
    monkeypatch.setenv("API_VERSION", "2.3.4")
    monkeypatch.setenv("SENSITIVE_KEYS", '["pin", "ssn"]')
    s = Settings(_env_file=None)
    assert s.DEBUG_MODE is True
    assert s.API_VERSION == "2.3.4"
    assert s.SENSITIVE_KEYS == ["pin", "ssn"]


def test_api_version_setting_flows_into_metadata(monkeypatch: pytest.MonkeyPatch) -> None:
    from sasato_res import success
    from sasato_res.core.config import settings

    monkeypatch.setattr(settings, "API_VERSION", "9.9.9")
    assert success("x").metadata.api_version == "9.9.9"


def test_default_api_version_tracks_package_version(monkeypatch: pytest.MonkeyPatch) -> None:
    from sasato_res import success

    monkeypatch.delenv("API_VERSION", raising=False)
    assert Settings(_env_file=None).API_VERSION == __version__
    assert success("x").metadata.api_version == __version__
