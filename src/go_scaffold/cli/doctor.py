"""``go-scaffold doctor`` — environment diagnostics command.

Collects the facts a scaffold run depends on (Python, the Go toolchain,
the OS) and renders them as a Rich table, or as plain text when Rich is
not installed.
"""

from __future__ import annotations

import platform
import sys

from go_scaffold.cli import exit_codes
from go_scaffold.cli.console import console
from go_scaffold.core.commands import DEFAULT_GO_EXECUTABLE
from go_scaffold.infra.go_toolchain import detect_go
from go_scaffold.version import __version__

OK = "[green]OK[/green]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _go_check(executable: str = DEFAULT_GO_EXECUTABLE) -> tuple[str, str, str]:
    """Return (label, value, status) for the Go toolchain row.

    A missing toolchain is a failure: every scaffold run needs it.
    """
    status_obj = detect_go(executable)
    if status_obj.found:
        return "go", str(status_obj.path), OK
    return "go", "not found", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


def _version_check() -> tuple[str, str, str]:
    return "go-scaffold", __version__, OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[tuple[str, str, str]]) -> None:
    print("\ngo-scaffold doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(checks: list[tuple[str, str, str]]) -> bool:
    """Render *checks* with Rich; return ``False`` when Rich is unavailable."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return False

    table = Table(
        title="go-scaffold doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()
    return True


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(go: str = DEFAULT_GO_EXECUTABLE) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when every check passes,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        _go_check(go),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    if not _print_rich_table(checks):
        _print_plain_table(checks)

    go_status = detect_go(go)
    if not go_status.found and go_status.install_commands:
        console.print(f"[yellow]{go} is not installed or not on PATH.[/yellow]")
        console.print("Install Go using one of the following commands:\n")
        for cmd in go_status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
