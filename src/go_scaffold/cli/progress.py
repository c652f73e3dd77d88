"""Rich step display driven by scaffold service progress events.

Bridges :class:`~go_scaffold.core.models.StepEvent` callbacks with a
Rich spinner.  The core layer only emits events; rendering happens here.

Design
------
* :class:`RichStepHook` is the callback passed to
  :meth:`ScaffoldService.scaffold`.
* ``started`` events update the spinner text, ``finished`` events print
  a check line.
* Without Rich, the same lines are written plainly to stderr.
"""

from __future__ import annotations

from typing import Any

from go_scaffold.cli.console import console, get_rich_console
from go_scaffold.core.models import ScaffoldState, StepEvent


def describe(event: StepEvent) -> str:
    """Return the human-readable line for *event*."""
    state, status, detail = event.state, event.status, event.detail
    started = status == "started"

    if state is ScaffoldState.DIRS_CREATED:
        return "Creating directories" if started else "Created directories"
    if state is ScaffoldState.MODULE_INITIALIZED:
        verb = "Initializing" if started else "Initialized"
        return f"{verb} module {detail}" if detail else f"{verb} module"
    if state is ScaffoldState.DEPS_INSTALLED:
        if started:
            return f"Fetching {detail}" if detail else "Fetching dependencies"
        return "Installed dependencies"
    if state is ScaffoldState.FILES_CREATED:
        return "Creating files" if started else "Created files"
    if state is ScaffoldState.DONE:
        return "Writing README.md" if started else "Wrote README.md"
    return state.value


class RichStepHook:
    """Callable progress adapter for Rich.

    Usage::

        with RichStepHook() as hook:
            service.scaffold(options, progress_callback=hook)
    """

    def __init__(self) -> None:
        self._console: Any = get_rich_console()
        self._status: Any = None
        if self._console is not None:
            self._status = self._console.status("", spinner="dots")
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichStepHook:
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    def stop(self) -> None:
        """Stop the spinner (idempotent)."""
        if self._started and self._status is not None:
            self._status.stop()
        self._started = False

    # ------------------------------------------------------------------
    # Hook callback
    # ------------------------------------------------------------------

    def __call__(self, event: StepEvent) -> None:
        text = describe(event)

        if event.status == "started":
            if self._status is None:
                console.print(f"… {text}")
                return
            self._status.update(f"[bold blue]{text}…[/bold blue]")
            if not self._started:
                self._status.start()
                self._started = True
            return

        line = f"[green]✓[/green] {text}"
        if self._console is None:
            console.print(line)
        else:
            self._console.print(line)
