"""Unit tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from userdesk.core.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_float,
    get_config,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("testing", TestingConfig), ("production", ProductionConfig), ("development", DevelopmentConfig)],
)
def test_get_config_selects_class(monkeypatch, name, expected) -> None:
    monkeypatch.setenv("APP_ENV", name)

    assert get_config() is expected


def test_get_config_falls_back_to_development(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "staging")

    assert get_config() is DevelopmentConfig


def test_env_float_ignores_garbage(monkeypatch) -> None:
    monkeypatch.setenv("TIMEOUT", "soon")

    assert env_float("TIMEOUT", 3.0) == 3.0


def test_env_float_parses(monkeypatch) -> None:
    monkeypatch.setenv("TIMEOUT", "2.5")

    assert env_float("TIMEOUT", 3.0) == 2.5


def test_testing_config_points_at_fake_host() -> None:
    assert TestingConfig.API_BASE_URL == "http://users.test"
    assert TestingConfig.USERS_PATH == "/users"


@pytest.mark.parametrize("config_cls", [DevelopmentConfig, TestingConfig, ProductionConfig])
def test_configs_expose_only_client_settings(config_cls) -> None:
    settings = {name for name in dir(config_cls) if name.isupper()}

    assert settings == {"API_BASE_URL", "USERS_PATH", "REQUEST_TIMEOUT", "LOG_LEVEL"}
