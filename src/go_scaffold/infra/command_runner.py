"""Subprocess-backed implementation of :class:`~go_scaffold.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns processes.
Launch failures are re-raised as
:class:`~go_scaffold.exceptions.SubprocessError`; the exit status of a
process that did start is returned unchanged for the caller to judge.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from go_scaffold.exceptions import SubprocessError


class SubprocessCommandRunner:
    """Concrete :class:`CommandRunner` backed by :func:`subprocess.run`.

    Parameters
    ----------
    quiet:
        Discard the child's stdout and stderr (default).  When ``False``
        the child writes straight to the terminal.  Output is never
        captured either way.
    """

    def __init__(self, *, quiet: bool = True) -> None:
        self._quiet: bool = quiet

    def run(self, args: Sequence[str], *, cwd: Path) -> int:
        """Run *args* in *cwd* and block until it exits.  No timeout."""
        if not Path(cwd).is_dir():
            raise SubprocessError(
                f"Cannot run {args[0]!r}: working directory {cwd} does not exist.",
            )
        sink = subprocess.DEVNULL if self._quiet else None
        try:
            completed = subprocess.run(
                list(args),
                cwd=cwd,
                stdout=sink,
                stderr=sink,
                check=False,
            )
        except FileNotFoundError as exc:
            raise SubprocessError(
                f"Cannot launch {args[0]!r}: command not found.",
                hint="Run `go-scaffold doctor` to check the Go toolchain.",
            ) from exc
        except OSError as exc:
            raise SubprocessError(
                f"Cannot launch {args[0]!r}: {exc.strerror or exc}",
            ) from exc
        return completed.returncode
