"""Core scaffold service: orchestrates the project creation pipeline.

The service sequences the steps and decides when to roll back.  The
actual side effects are delegated to a
:class:`~go_scaffold.core.protocols.ProjectWriter` and a
:class:`~go_scaffold.core.protocols.CommandRunner` injected at
construction time.

Pipeline
--------
``VALIDATED → DIRS_CREATED → MODULE_INITIALIZED → DEPS_INSTALLED →
FILES_CREATED → DONE``

A failure while initializing the module, installing dependencies, or
creating files triggers :meth:`ScaffoldService.rollback`; the resulting
terminal state (``ROLLED_BACK`` or ``ROLLBACK_SKIPPED``) is attached to
the re-raised error as ``final_state``.  Directory and README failures
are reported without rollback.

Guarantees
----------
* No ``print()``; progress is reported through the optional callback.
* Only :class:`~go_scaffold.exceptions.GoScaffoldError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from go_scaffold.core.commands import (
    DEFAULT_GO_EXECUTABLE,
    fetch_command,
    module_init_command,
)
from go_scaffold.core.models import (
    DEFAULT_LAYOUT,
    MARKER_CONTENT,
    MARKER_FILENAME,
    README_CONTENT,
    README_FILENAME,
    ProjectOptions,
    ScaffoldLayout,
    ScaffoldResult,
    ScaffoldState,
    StepEvent,
)
from go_scaffold.core.protocols import CommandRunner, ProjectWriter
from go_scaffold.exceptions import GoScaffoldError, SubprocessError

ProgressCallback = Callable[[StepEvent], None]


class ScaffoldService:
    """Drives a single scaffold run.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    writer:
        Any object satisfying the :class:`ProjectWriter` protocol.
    layout:
        Directories, dependencies and files to create.
    go:
        Name or path of the Go executable.
    """

    def __init__(
        self,
        runner: CommandRunner,
        writer: ProjectWriter,
        *,
        layout: ScaffoldLayout = DEFAULT_LAYOUT,
        go: str = DEFAULT_GO_EXECUTABLE,
    ) -> None:
        self._runner: CommandRunner = runner
        self._writer: ProjectWriter = writer
        self._layout: ScaffoldLayout = layout
        self._go: str = go

    @property
    def layout(self) -> ScaffoldLayout:
        return self._layout

    # ------------------------------------------------------------------
    # Individual steps
    # ------------------------------------------------------------------

    def create_directories(self, root: Path) -> None:
        """Create every layout subdirectory below *root*."""
        try:
            self._writer.make_directories(root, self._layout.subdirectories)
        except GoScaffoldError as exc:
            exc.phase = exc.phase or "creating directories"
            raise

    def init_module(self, root: Path, module: str) -> None:
        """Run the module-init command inside *root*."""
        self._run_checked(
            module_init_command(module, go=self._go),
            cwd=root,
            phase="initializing module",
        )

    def install_dependencies(
        self,
        root: Path,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Fetch each layout dependency in order, stopping at the first failure."""
        for dependency in self._layout.dependencies:
            _emit(
                progress_callback,
                StepEvent(ScaffoldState.DEPS_INSTALLED, "started", dependency),
            )
            self._run_checked(
                fetch_command(dependency, go=self._go),
                cwd=root,
                phase=f"installing dependency {dependency}",
            )

    def create_required_files(self, root: Path, env_format: str) -> list[Path]:
        """Create the empty placeholder files with the env suffix resolved."""
        names = self._layout.resolve_required_files(env_format)
        try:
            return self._writer.create_empty_files(root, names)
        except GoScaffoldError as exc:
            exc.phase = exc.phase or "creating files"
            raise

    def create_readme(self, root: Path) -> None:
        """Write the README and then the completion marker."""
        try:
            self._writer.write_text(root / README_FILENAME, README_CONTENT)
            self._writer.write_text(root / MARKER_FILENAME, MARKER_CONTENT)
        except GoScaffoldError as exc:
            exc.phase = exc.phase or "creating README"
            raise

    def is_complete(self, root: Path) -> bool:
        """Return ``True`` when *root* holds the completion marker or a README.

        Presence alone counts; the README check also covers projects
        created before the marker file existed.
        """
        return self._writer.exists(root / MARKER_FILENAME) or self._writer.exists(
            root / README_FILENAME
        )

    def rollback(self, root: Path) -> ScaffoldState:
        """Delete a partially created project unless it is marked complete.

        Returns
        -------
        ScaffoldState
            ``ROLLBACK_SKIPPED`` when the project is complete, otherwise
            ``ROLLED_BACK``.

        Raises
        ------
        RollbackError
            When the tree cannot or must not be deleted.
        """
        try:
            if self.is_complete(root):
                return ScaffoldState.ROLLBACK_SKIPPED
            self._writer.remove_tree(root)
        except GoScaffoldError as exc:
            exc.phase = exc.phase or "rolling back"
            raise
        return ScaffoldState.ROLLED_BACK

    # ------------------------------------------------------------------
    # Full pipeline
    # ------------------------------------------------------------------

    def scaffold(
        self,
        options: ProjectOptions,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> ScaffoldResult:
        """Run every step for *options* and return the outcome.

        Raises
        ------
        GoScaffoldError
            The first failure, with ``phase`` and (after rollback)
            ``final_state`` populated.
        """
        root = options.root

        _emit(progress_callback, StepEvent(ScaffoldState.DIRS_CREATED, "started"))
        self.create_directories(root)
        _emit(progress_callback, StepEvent(ScaffoldState.DIRS_CREATED, "finished"))

        try:
            _emit(
                progress_callback,
                StepEvent(ScaffoldState.MODULE_INITIALIZED, "started", options.module),
            )
            self.init_module(root, options.module)
            _emit(
                progress_callback,
                StepEvent(ScaffoldState.MODULE_INITIALIZED, "finished", options.module),
            )

            self.install_dependencies(root, progress_callback=progress_callback)
            _emit(progress_callback, StepEvent(ScaffoldState.DEPS_INSTALLED, "finished"))

            _emit(progress_callback, StepEvent(ScaffoldState.FILES_CREATED, "started"))
            files = self.create_required_files(root, options.env_format)
            _emit(progress_callback, StepEvent(ScaffoldState.FILES_CREATED, "finished"))
        except GoScaffoldError as exc:
            exc.final_state = self.rollback(root)
            raise

        self.create_readme(root)
        _emit(progress_callback, StepEvent(ScaffoldState.DONE, "finished"))

        return ScaffoldResult(root=root, state=ScaffoldState.DONE, files=tuple(files))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run_checked(self, args: list[str], *, cwd: Path, phase: str) -> None:
        try:
            returncode = self._runner.run(args, cwd=cwd)
        except GoScaffoldError as exc:
            exc.phase = exc.phase or phase
            raise

        if returncode != 0:
            raise SubprocessError(
                f"`{' '.join(args)}` exited with status {returncode}.",
                phase=phase,
                returncode=returncode,
            )


def _emit(callback: ProgressCallback | None, event: StepEvent) -> None:
    if callback is not None:
        callback(event)
