"""Decorative lookups for rendering user cards."""

from __future__ import annotations

from typing import Final

CARD_GRADIENTS: Final[tuple[str, ...]] = (
    "bg-gradient-to-br from-rose-100 via-pink-100 to-red-100",
    "bg-gradient-to-br from-blue-100 via-cyan-100 to-teal-100",
    "bg-gradient-to-br from-purple-100 via-violet-100 to-indigo-100",
    "bg-gradient-to-br from-green-100 via-emerald-100 to-lime-100",
    "bg-gradient-to-br from-yellow-100 via-amber-100 to-orange-100",
    "bg-gradient-to-br from-gray-100 via-slate-100 to-zinc-100",
)

AVATAR_ICONS: Final[tuple[str, ...]] = (
    "person",
    "face",
    "account_circle",
    "supervisor_account",
    "badge",
    "contact_mail",
)


def get_card_gradient(index: int) -> str:
    """Return the card gradient for the ``index``-th row, cycling through the palette."""
    return CARD_GRADIENTS[index % len(CARD_GRADIENTS)]


def get_avatar_icon(index: int) -> str:
    """Return the avatar icon name for the ``index``-th row, cycling through the set."""
    return AVATAR_ICONS[index % len(AVATAR_ICONS)]
