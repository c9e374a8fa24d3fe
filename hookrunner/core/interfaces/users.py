"""
User scope protocol.
"""
from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Protocol


class HookUser(Protocol):
    """Identity and path scope of the user performing an operation."""

    username: str
    scope: str

    def full_path(self, path: str) -> str:
        """Resolve a path relative to the user's scope to an absolute path."""
        ...


@dataclass(frozen=True)
class ScopedUser:
    """
    Plain HookUser whose files live under ``root``/``scope``.

    Relative paths are rooted at the scope, so ``/docs/a.txt`` and
    ``docs/a.txt`` resolve to the same file. An empty path resolves to
    the scope directory itself.
    """
    username: str
    scope: str = "/"
    root: str = "/"

    @property
    def base_path(self) -> str:
        return posixpath.normpath(posixpath.join(self.root, self.scope.lstrip("/")))

    def full_path(self, path: str) -> str:
        # Clean as an absolute path first so ".." cannot climb above the scope.
        relative = posixpath.normpath("/" + path).lstrip("/")
        return posixpath.normpath(posixpath.join(self.base_path, relative))
