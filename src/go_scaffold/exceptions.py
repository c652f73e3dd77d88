"""Custom exception hierarchy for go-scaffold.

Every error that crosses a layer boundary must inherit from
:class:`GoScaffoldError`.  Raw ``OSError`` instances raised by the
filesystem or by process launching must NEVER propagate beyond the
infrastructure layer; they are caught there and re-raised as one of
the typed subclasses below.

Hierarchy
---------
GoScaffoldError
├── ValidationError
├── FilesystemError
├── SubprocessError
└── RollbackError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from go_scaffold.core.models import ScaffoldState


class GoScaffoldError(Exception):
    """Base exception for all go-scaffold errors.

    The CLI error boundary renders these as a single line prefixed with
    the failing phase, followed by the optional hint.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        phase: str | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

        self.phase: str | None = phase
        """Pipeline phase that failed (e.g. ``"initializing module"``)."""

        self.final_state: ScaffoldState | None = None
        """Terminal state reached after the failure, set by the service."""


# --- Input -----------------------------------------------------------------

class ValidationError(GoScaffoldError):
    """Raised when a flag value is empty, contains whitespace, or is unknown."""


# --- Filesystem ------------------------------------------------------------

class FilesystemError(GoScaffoldError):
    """Raised when a directory or file cannot be created or written."""


# --- External commands -----------------------------------------------------

class SubprocessError(GoScaffoldError):
    """Raised when an external command exits non-zero or cannot be launched."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        phase: str | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint, phase=phase)
        self.returncode: int | None = returncode


# --- Cleanup ---------------------------------------------------------------

class RollbackError(GoScaffoldError):
    """Raised when a partially created project cannot be deleted."""
