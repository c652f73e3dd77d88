"""Local-disk implementation of :class:`~go_scaffold.core.protocols.ProjectWriter`.

This module is the **only** place in the codebase that creates, writes,
or deletes project files.  Every ``OSError`` is caught here and re-raised
as :class:`~go_scaffold.exceptions.FilesystemError` or, for deletions,
:class:`~go_scaffold.exceptions.RollbackError`.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from go_scaffold.exceptions import FilesystemError, RollbackError


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class LocalProjectWriter:
    """Concrete :class:`ProjectWriter` backed by :mod:`pathlib` and :mod:`shutil`.

    Satisfies the protocol structurally; no explicit inheritance.
    """

    def make_directories(self, root: Path, entries: Iterable[str]) -> None:
        """Create ``root/entry`` for each entry; existing directories are fine.

        Stops at the first entry that fails and leaves the earlier ones.
        """
        for entry in entries:
            path = root / entry
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FilesystemError(
                    f"Cannot create directory {path}: {_reason(exc)}",
                ) from exc

    def create_empty_files(self, root: Path, entries: Iterable[str]) -> list[Path]:
        """Create each ``root/entry`` empty, truncating existing files."""
        created: list[Path] = []
        for entry in entries:
            path = root / entry
            try:
                path.write_bytes(b"")
            except OSError as exc:
                raise FilesystemError(
                    f"Cannot create file {path}: {_reason(exc)}",
                ) from exc
            created.append(path)
        return created

    def write_text(self, path: Path, content: str) -> None:
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FilesystemError(
                f"Cannot write {path}: {_reason(exc)}",
            ) from exc

    def exists(self, path: Path) -> bool:
        return path.exists()

    def remove_tree(self, root: Path) -> None:
        """Recursively delete *root*; a missing root is not an error.

        Refuses, before touching anything, a root spelled as ``.`` or ``..``
        and any root that is the working directory or one of its parents.
        """
        if root.name in ("", ".", ".."):
            raise RollbackError(
                f"Refusing to delete {str(root)!r}.",
                hint="Pass a named project directory with -dir.",
            )
        if not root.exists():
            return

        resolved = root.resolve()
        cwd = Path.cwd().resolve()
        if resolved == cwd or resolved in cwd.parents:
            raise RollbackError(
                f"Refusing to delete {root}: it contains the working directory.",
                hint="Remove the directory by hand before running again.",
            )
        try:
            shutil.rmtree(root)
        except OSError as exc:
            raise RollbackError(
                f"Cannot delete directory {root}: {_reason(exc)}",
                hint="Remove the directory by hand before running again.",
            ) from exc
