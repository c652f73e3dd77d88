"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and the error
boundary keep working on a bare interpreter; output then degrades to
plain stderr lines with the markup stripped.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from go_scaffold.core.models import ScaffoldState
from go_scaffold.exceptions import GoScaffoldError

_MARKUP_RE = re.compile(r"\[/?[a-z ]+\]")


def get_rich_console() -> Any | None:
    """Return a Rich console targeting stderr, or ``None`` without Rich."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console(stderr=True)


def strip_markup(text: str) -> str:
    """Remove simple Rich style tags such as ``[bold red]`` and ``[/bold red]``."""
    return _MARKUP_RE.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-stderr fallback."""

    def print(self, *objects: object) -> None:
        rich_console = get_rich_console()
        if rich_console is None:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr,
            )
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def render_error(exc: GoScaffoldError) -> None:
    """Print *exc* with its phase, hint and rollback outcome."""
    if exc.phase:
        console.print(f"[bold red]Error while {exc.phase}:[/bold red] {exc}")
    else:
        console.print(f"[bold red]Error:[/bold red] {exc}")

    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {exc.hint}")

    if exc.final_state is ScaffoldState.ROLLED_BACK:
        console.print("[yellow]Removed the partially created project.[/yellow]")
    elif exc.final_state is ScaffoldState.ROLLBACK_SKIPPED:
        console.print(
            "[yellow]Project was created successfully before; "
            "left it untouched.[/yellow]"
        )
