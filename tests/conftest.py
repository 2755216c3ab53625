"""Global pytest fixtures for the userdesk client."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
import responses

os.environ.setdefault("APP_ENV", "testing")

from userdesk.core.config import TestingConfig  # noqa: E402
from userdesk.gateway import UserGateway  # noqa: E402
from userdesk.services import UserListEditor  # noqa: E402

from tests.factories.user import UserFactory  # noqa: E402


class ConfirmStub:
    """Record confirmation prompts and answer with a fixed value."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.messages: list[str] = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """Undo handler swaps done by ``configure_logging`` during a test."""

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def config() -> type[TestingConfig]:
    """Configuration class pointing at the fake backend host."""

    return TestingConfig


@pytest.fixture()
def users_url(config: type[TestingConfig]) -> str:
    """Absolute URL of the users collection on the fake backend."""

    return f"{config.API_BASE_URL}{config.USERS_PATH}"


@pytest.fixture()
def mocked_http() -> Generator[responses.RequestsMock, None, None]:
    """Activate ``responses`` and fail on unexpected or unused routes."""

    with responses.RequestsMock(assert_all_requests_are_fired=True) as rsps:
        yield rsps


@pytest.fixture()
def gateway(config: type[TestingConfig]) -> Generator[UserGateway, None, None]:
    """Real gateway bound to the testing config; pair with ``mocked_http``."""

    with UserGateway.from_config(config) as gw:
        yield gw


@pytest.fixture()
def fake_gateway() -> MagicMock:
    """Gateway double whose methods are plain mocks."""

    return MagicMock(spec=UserGateway)


@pytest.fixture()
def confirm() -> ConfirmStub:
    """Confirmation stub answering *yes*."""

    return ConfirmStub(answer=True)


@pytest.fixture()
def editor(fake_gateway: MagicMock, confirm: ConfirmStub) -> UserListEditor:
    """Editor wired to the gateway double and the confirmation stub."""

    return UserListEditor(fake_gateway, confirm=confirm)


@pytest.fixture()
def seeded_users() -> list[Any]:
    """Two persisted users mirroring a typical first page."""

    return [
        UserFactory(id=1, name="John Doe", email="john@example.com"),
        UserFactory(id=2, name="Jane Smith", email="jane@example.com"),
    ]


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
