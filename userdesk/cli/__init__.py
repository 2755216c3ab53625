"""Command-line entry point."""

from __future__ import annotations

from .users import users_cli

cli = users_cli

__all__ = ["cli", "users_cli"]
