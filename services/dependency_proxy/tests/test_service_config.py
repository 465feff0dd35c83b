"""Unit tests for service configuration loading."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from app.core.config import DependencyProxySettings
from app.core.errors import ConfigLoadError
from app.schemas.service_config import DependencyRef, ServiceConfig
from app.services.service_config import load_service_config, resolve_service_config

from proxy_test_utils import LEDGER_URL, PAYMENTS_URL, service_document


def test_load_service_config(write_service_config: Callable[[Any], str]) -> None:
    path = write_service_config(
        service_document(("payments", PAYMENTS_URL), ("ledger", LEDGER_URL))
    )

    config = load_service_config(path)

    assert config.name == "checkout"
    assert config.version == "1.4.0"
    assert config.dependencies == (
        DependencyRef(name="payments", url=PAYMENTS_URL),
        DependencyRef(name="ledger", url=LEDGER_URL),
    )
    assert config.has_dependencies


def test_load_service_config_without_apps(write_service_config: Callable[[Any], str]) -> None:
    config = load_service_config(write_service_config({"name": "edge", "version": "3"}))

    assert config.dependencies == ()
    assert not config.has_dependencies


def test_load_service_config_null_apps(write_service_config: Callable[[Any], str]) -> None:
    config = load_service_config(
        write_service_config({"name": "edge", "version": "3", "apps": None})
    )

    assert config.dependencies == ()


def test_service_config_is_immutable(write_service_config: Callable[[Any], str]) -> None:
    config = load_service_config(write_service_config(service_document(("payments", PAYMENTS_URL))))

    with pytest.raises(ValidationError):
        config.name = "other"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        config.dependencies[0].url = "http://elsewhere"  # type: ignore[misc]


def test_load_service_config_unset_path() -> None:
    with pytest.raises(ConfigLoadError, match="APP_CONFIG_PATH is not set"):
        load_service_config("")


def test_load_service_config_missing_file(tmp_path: Path) -> None:
    missing = str(tmp_path / "absent.json")

    with pytest.raises(ConfigLoadError) as exc_info:
        load_service_config(missing)

    assert exc_info.value.path == missing


@pytest.mark.parametrize(
    "document",
    [
        "{not json",
        "[]",
        '{"name": "edge", "apps": [{"name": 5, "url": "http://x"}]}',
    ],
)
def test_load_service_config_malformed(
    write_service_config: Callable[[Any], str], document: str
) -> None:
    with pytest.raises(ConfigLoadError, match="invalid document"):
        load_service_config(write_service_config(document))


def test_resolve_service_config_fails_fast(
    make_settings: Callable[..., DependencyProxySettings], tmp_path: Path
) -> None:
    app_settings = make_settings(app_config_path=str(tmp_path / "absent.json"))

    with pytest.raises(ConfigLoadError):
        resolve_service_config(app_settings)


def test_resolve_service_config_acknowledged_empty(
    make_settings: Callable[..., DependencyProxySettings], tmp_path: Path
) -> None:
    app_settings = make_settings(
        app_config_path=str(tmp_path / "absent.json"), allow_empty_config=True
    )

    assert resolve_service_config(app_settings) == ServiceConfig()


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_CONFIG_PATH", "/etc/proxy/app.json")
    monkeypatch.setenv("DOWNSTREAM_TIMEOUT", "2.5")
    monkeypatch.setenv("DOWNSTREAM_MAX_CONCURRENCY", "4")

    app_settings = DependencyProxySettings(_env_file=None)

    assert app_settings.app_config_path == "/etc/proxy/app.json"
    assert app_settings.downstream_timeout == 2.5
    assert app_settings.downstream_max_concurrency == 4
    assert app_settings.allow_empty_config is False
    assert app_settings.service_port == 9999
