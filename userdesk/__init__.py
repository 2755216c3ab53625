"""Expose the editor factory at package level.

Provide convenient access to :func:`userdesk.factory.create_editor` so callers
can ``from userdesk import create_editor`` without traversing the package
structure.
"""

from __future__ import annotations

from .factory import create_editor

__all__ = ["create_editor"]
