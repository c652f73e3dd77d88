"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
The scaffold service depends ONLY on these protocols, so tests can swap
in a recording runner or an in-memory writer without spawning processes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol


class CommandRunner(Protocol):
    """Run a named command with arguments inside a working directory."""

    def run(self, args: Sequence[str], *, cwd: Path) -> int:
        """Run *args* with *cwd* as working directory and block until exit.

        Returns
        -------
        int
            The process exit status.

        Raises
        ------
        SubprocessError
            When the command cannot be launched at all.
        """
        ...  # pragma: no cover


class ProjectWriter(Protocol):
    """Filesystem operations needed to build and tear down a project.

    Implementations must map every ``OSError`` to
    :class:`~go_scaffold.exceptions.FilesystemError` (or
    :class:`~go_scaffold.exceptions.RollbackError` for :meth:`remove_tree`).
    """

    def make_directories(self, root: Path, entries: Iterable[str]) -> None:
        """Create ``root/entry`` for each entry, parents included, idempotently."""
        ...  # pragma: no cover

    def create_empty_files(self, root: Path, entries: Iterable[str]) -> list[Path]:
        """Create (or truncate) ``root/entry`` for each entry."""
        ...  # pragma: no cover

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path*, replacing any previous content."""
        ...  # pragma: no cover

    def exists(self, path: Path) -> bool:
        """Return ``True`` when *path* exists."""
        ...  # pragma: no cover

    def remove_tree(self, root: Path) -> None:
        """Recursively delete *root*."""
        ...  # pragma: no cover
