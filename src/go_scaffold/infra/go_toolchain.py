"""Infrastructure: Go toolchain detection and platform guidance.

Locates the ``go`` executable on the system PATH and suggests
platform-specific install commands when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No automatic installation.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from go_scaffold.core.commands import DEFAULT_GO_EXECUTABLE


@dataclass(frozen=True, slots=True)
class GoStatus:
    """Result of a Go toolchain probe.

    Attributes
    ----------
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing Go on the current
        platform.  Empty when Go is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_go(executable: str = DEFAULT_GO_EXECUTABLE) -> GoStatus:
    """Probe the system for *executable*.

    Returns a :class:`GoStatus` whether or not it is present; the caller
    decides how to report it.
    """
    result = shutil.which(executable)
    if result is not None:
        return GoStatus(found=True, path=Path(result).resolve(), install_commands=())

    return GoStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install GoLang.Go",
            "choco install golang",
        )
    if system == "linux":
        return (
            "sudo apt install golang-go",
            "sudo dnf install golang",
            "sudo pacman -S go",
        )
    if system == "darwin":
        return ("brew install go",)
    return ("Download Go from https://go.dev/dl/",)
