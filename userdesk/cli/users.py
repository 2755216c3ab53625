"""Command-line screen for listing, adding, editing and deleting users."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import click

from userdesk.core.config import BaseConfig, get_config
from userdesk.core.errors import GatewayError
from userdesk.core.logger import configure_logging
from userdesk.factory import create_editor
from userdesk.gateway import UserGateway
from userdesk.models import User
from userdesk.services import UserListEditor, get_avatar_icon

LOGGER = logging.getLogger(__name__)


def _resolve_config(ctx: click.Context) -> type[BaseConfig]:
    """Return the active config class, honoring ``--base-url``."""
    config = get_config()
    base_url = ctx.obj.get("base_url")
    if base_url:
        config = type("CliConfig", (config,), {"API_BASE_URL": base_url})
    return config


def _log_level(ctx: click.Context) -> str:
    # Command output owns stdout; only warnings surface unless --verbose.
    return "DEBUG" if ctx.obj.get("verbose") else "WARNING"


@contextmanager
def _open_editor(ctx: click.Context, *, assume_yes: bool = False) -> Iterator[UserListEditor]:
    """Yield an editor whose gateway session is closed on exit."""
    confirm = (lambda _message: True) if assume_yes else None
    editor = create_editor(
        _resolve_config(ctx),
        confirm=confirm,
        log_level=_log_level(ctx),
        log_stream=sys.stderr,
    )
    try:
        yield editor
    finally:
        editor.gateway.close()


def _load(editor: UserListEditor) -> None:
    if not editor.initialize():
        raise click.ClickException("Could not load users from the backend.")


def _find(editor: UserListEditor, user_id: int) -> User:
    user = editor.find(user_id)
    if user is None:
        raise click.ClickException(f"User {user_id} not found.")
    return user


def _format_user(user: User, index: int) -> str:
    ident = "-" if user.id is None else str(user.id)
    return f"  [{get_avatar_icon(index)}] #{ident}  {user.name} <{user.email}>"


def _echo_users(users: Iterable[User]) -> None:
    """Print one line per user, cycling avatar icons by position."""
    rows = list(users)
    click.echo(f"Users ({len(rows)}):")
    if not rows:
        click.echo("  (none)")
        return
    for index, user in enumerate(rows):
        click.echo(_format_user(user, index))


@click.group("userdesk")
@click.option("--verbose", is_flag=True, help="Enable debug logging of HTTP exchanges.")
@click.option("--base-url", default=None, help="Override API_BASE_URL for this invocation.")
@click.pass_context
def users_cli(ctx: click.Context, verbose: bool, base_url: str | None) -> None:
    """Manage users stored in the REST backend."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["base_url"] = base_url


@users_cli.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """Show every user."""
    with _open_editor(ctx) as editor:
        _load(editor)
        _echo_users(editor.items)


@users_cli.command("show")
@click.argument("user_id", type=int)
@click.pass_context
def show_command(ctx: click.Context, user_id: int) -> None:
    """Fetch a single user by id."""
    config = _resolve_config(ctx)
    configure_logging(_log_level(ctx), stream=sys.stderr)
    with UserGateway.from_config(config) as gateway:
        try:
            user = gateway.fetch_by_id(user_id)
        except GatewayError as exc:
            raise click.ClickException(f"Could not fetch user {user_id}: {exc}") from exc
    click.echo(_format_user(user, 0))


@users_cli.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Contact email.")
@click.pass_context
def add_command(ctx: click.Context, name: str, email: str) -> None:
    """Create a user."""
    with _open_editor(ctx) as editor:
        editor.set_draft(name=name, email=email)
        if not editor.submit():
            raise click.ClickException("User was not created.")
        created = editor.items[-1]
        click.echo("Created:")
        click.echo(_format_user(created, len(editor.items) - 1))


@users_cli.command("edit")
@click.argument("user_id", type=int)
@click.option("--name", default=None, help="New display name (kept when omitted).")
@click.option("--email", default=None, help="New email (kept when omitted).")
@click.pass_context
def edit_command(ctx: click.Context, user_id: int, name: str | None, email: str | None) -> None:
    """Change the name and/or email of a user."""
    with _open_editor(ctx) as editor:
        _load(editor)
        user = _find(editor, user_id)
        editor.start_edit(user)
        editor.set_draft(name=name, email=email)
        if not editor.submit():
            editor.cancel_edit()
            raise click.ClickException(f"User {user_id} was not updated.")
        updated = _find(editor, user_id)
        click.echo("Updated:")
        click.echo(_format_user(updated, editor.items.index(updated)))


@users_cli.command("delete")
@click.argument("user_id", type=int)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def delete_command(ctx: click.Context, user_id: int, yes: bool) -> None:
    """Delete a user after confirmation."""
    with _open_editor(ctx, assume_yes=yes) as editor:
        _load(editor)
        user = _find(editor, user_id)
        if not editor.remove(user):
            raise click.ClickException(f"User {user_id} was not deleted.")
    LOGGER.debug("Delete confirmed", extra={"user_id": user_id})
    click.echo(f"Deleted {user.name}.")
