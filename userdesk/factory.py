"""Editor factory wiring configuration, logging and the users gateway."""

from __future__ import annotations

from typing import IO

import requests

from userdesk.core.config import BaseConfig, get_config
from userdesk.core.logger import configure_logging
from userdesk.gateway import UserGateway
from userdesk.services.list_editor import Confirm, UserListEditor


def create_editor(
    config: type[BaseConfig] | object | None = None,
    *,
    confirm: Confirm | None = None,
    session: requests.Session | None = None,
    log_level: str | int | None = None,
    log_stream: IO[str] | None = None,
) -> UserListEditor:
    """Build a :class:`UserListEditor` bound to the configured backend.

    Parameters
    ----------
    config:
        Config class or object; defaults to :func:`get_config`.
    confirm:
        Confirmation callable used before deletes. Defaults to a terminal prompt.
    session:
        Optional ``requests.Session`` shared with the gateway.
    log_level:
        Overrides ``config.LOG_LEVEL`` when given.
    log_stream:
        Destination of log records; stdout when omitted.
    """

    cfg = get_config() if config is None else config
    level = log_level if log_level is not None else getattr(cfg, "LOG_LEVEL", "INFO")
    configure_logging(level, stream=log_stream)
    gateway = UserGateway.from_config(cfg, session=session)
    return UserListEditor(gateway, confirm=confirm)
