"""CLI application entry point and command routing for go-scaffold.

This module is the **sole error boundary** for the entire application.
It catches :class:`~go_scaffold.exceptions.GoScaffoldError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, renders a
user-friendly message via Rich, and returns well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; work is delegated to the core service
  and the infrastructure adapters.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from go_scaffold.cli import exit_codes
from go_scaffold.cli.console import console, render_error
from go_scaffold.core.commands import DEFAULT_GO_EXECUTABLE
from go_scaffold.core.models import DEFAULT_ENV_FORMAT, ENV_FORMATS
from go_scaffold.exceptions import GoScaffoldError, ValidationError
from go_scaffold.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The single-dash long flags (``-dir``, ``-module``, ``-env``) are the
    primary spelling; double-dash aliases are accepted too.
    """
    parser = argparse.ArgumentParser(
        prog="go-scaffold",
        description="Create a Go web-service project skeleton.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=("doctor",),
        default=None,
        help="'doctor' runs environment diagnostics instead of scaffolding.",
    )
    parser.add_argument(
        "-dir",
        "--dir",
        dest="directory",
        default=None,
        help="directory name for the project (ex. api)",
    )
    parser.add_argument(
        "-module",
        "--module",
        dest="module",
        default=None,
        help="Go module name (ex. github.com/acme/api)",
    )
    parser.add_argument(
        "-env",
        "--env",
        dest="env_format",
        default=DEFAULT_ENV_FORMAT,
        help=f"config file format: {' or '.join(ENV_FORMATS)} (default: %(default)s)",
    )
    parser.add_argument(
        "--go",
        default=DEFAULT_GO_EXECUTABLE,
        help="Go executable to invoke (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show output of the go commands",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_scaffold(args: argparse.Namespace) -> int:
    """Validate flags, then run the scaffold pipeline with live progress."""
    from go_scaffold.cli.progress import RichStepHook
    from go_scaffold.core.scaffold_service import ScaffoldService
    from go_scaffold.core.validation import validate_options
    from go_scaffold.infra.command_runner import SubprocessCommandRunner
    from go_scaffold.infra.filesystem import LocalProjectWriter

    options = validate_options(
        args.directory or "",
        args.module or "",
        args.env_format,
    )

    service = ScaffoldService(
        SubprocessCommandRunner(quiet=not args.verbose),
        LocalProjectWriter(),
        go=args.go,
    )

    with RichStepHook() as hook:
        result = service.scaffold(options, progress_callback=hook)

    console.print(
        f"\n[bold green]Project created successfully![/bold green]  {result.root}"
    )
    return exit_codes.SUCCESS


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from go_scaffold.cli.doctor import run_doctor

    return run_doctor(args.go)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the go-scaffold CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    if not argv:
        parser.print_help()
        return exit_codes.SUCCESS

    args = parser.parse_args(argv)
    if args.command == "doctor":
        return _handle_doctor(args)

    return _handle_scaffold(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ValidationError as exc:
        render_error(exc)
        sys.exit(exit_codes.USAGE_ERROR)
    except GoScaffoldError as exc:
        render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
