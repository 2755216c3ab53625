"""Outbound HTTP adapters."""

from __future__ import annotations

from .user_gateway import UserGateway

__all__ = ["UserGateway"]
