"""End-to-end CLI tests (cli/app.py, cli/console.py, cli/progress.py).

The subprocess runner is swapped for the recording fake from
``conftest``; every run happens inside ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from go_scaffold.cli import exit_codes
from go_scaffold.cli.app import cli, main
from go_scaffold.cli.console import strip_markup
from go_scaffold.cli.progress import RichStepHook, describe
from go_scaffold.core.models import MARKER_CONTENT, MARKER_FILENAME, ScaffoldState, StepEvent
from go_scaffold.exceptions import ValidationError

from conftest import RecordingRunner


@pytest.fixture()
def fake_runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> RecordingRunner:
    from go_scaffold.infra import command_runner

    runner = RecordingRunner()
    monkeypatch.setattr(
        command_runner, "SubprocessCommandRunner", lambda quiet=True: runner,
    )
    monkeypatch.chdir(tmp_path)
    return runner


def _run_cli(argv: list[str]) -> int:
    with patch("sys.argv", ["go-scaffold", *argv]):
        with pytest.raises(SystemExit) as exc_info:
            cli()
    return int(exc_info.value.code or 0)


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMainScaffold:
    def test_creates_project(
        self, fake_runner: RecordingRunner, tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["-dir", "api", "-module", "github.com/acme/api"])

        assert code == exit_codes.SUCCESS
        assert (tmp_path / "api" / "config" / "config.env").is_file()
        assert (tmp_path / "api" / MARKER_FILENAME).read_text() == MARKER_CONTENT
        assert fake_runner.calls[0][1] == Path("api")
        assert "Project created successfully!" in capsys.readouterr().err

    def test_equals_syntax_and_json(self, fake_runner: RecordingRunner, tmp_path: Path) -> None:
        code = main(["-dir=api", "-module=github.com/acme/api", "-env=json"])
        assert code == exit_codes.SUCCESS
        assert (tmp_path / "api" / "config" / "config.json").is_file()

    def test_double_dash_aliases(self, fake_runner: RecordingRunner, tmp_path: Path) -> None:
        code = main(["--dir", "api", "--module", "github.com/acme/api", "--env", "env"])
        assert code == exit_codes.SUCCESS
        assert (tmp_path / "api" / "main.go").is_file()

    def test_go_flag(self, fake_runner: RecordingRunner) -> None:
        main(["-dir", "api", "-module", "m", "--go", "go1.22"])
        assert fake_runner.argvs[0] == ["go1.22", "mod", "init", "m"]

    def test_missing_module_raises_validation_error(
        self, fake_runner: RecordingRunner, tmp_path: Path,
    ) -> None:
        with pytest.raises(ValidationError, match="-module"):
            main(["-dir", "api"])
        assert list(tmp_path.iterdir()) == []
        assert fake_runner.calls == []


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit_code(self, fake_runner: RecordingRunner) -> None:
        assert _run_cli(["-dir", "api", "-module", "m"]) == exit_codes.SUCCESS

    def test_validation_error_exit_code(
        self, fake_runner: RecordingRunner, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(["-dir", "api", "-module", "m", "-env", "yaml"])
        assert code == exit_codes.USAGE_ERROR
        err = capsys.readouterr().err
        assert "checking flags" in err
        assert "Unknown env format" in err

    def test_env_alone_is_a_usage_error(
        self, fake_runner: RecordingRunner, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(["-env", "xml"]) == exit_codes.USAGE_ERROR
        assert "Unknown env format" in capsys.readouterr().err
        assert fake_runner.calls == []

    @pytest.mark.parametrize("directory", [".", ".."])
    def test_dot_directory_is_a_usage_error(
        self, fake_runner: RecordingRunner, tmp_path: Path, directory: str,
    ) -> None:
        (tmp_path / "precious.txt").write_text("keep")
        code = _run_cli(["-dir", directory, "-module", "m"])

        assert code == exit_codes.USAGE_ERROR
        assert fake_runner.calls == []
        assert sorted(p.name for p in tmp_path.iterdir()) == ["precious.txt"]

    def test_module_init_failure_reports_rollback(
        self, fake_runner: RecordingRunner, tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        fake_runner.fail_on["init"] = 1

        code = _run_cli(["-dir", "api", "-module", "m"])

        assert code == exit_codes.GENERAL_ERROR
        assert not (tmp_path / "api").exists()
        err = capsys.readouterr().err
        assert "initializing module" in err
        assert "Removed the partially created project." in err

    def test_rerun_reports_skip(
        self, fake_runner: RecordingRunner, tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(["-dir", "api", "-module", "m"]) == exit_codes.SUCCESS
        assert _run_cli(["-dir", "api", "-module", "m"]) == exit_codes.GENERAL_ERROR

        assert (tmp_path / "api" / MARKER_FILENAME).exists()
        assert "left it untouched" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from go_scaffold.cli import app as app_module

        def _interrupt(_argv: object = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert _run_cli([]) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from go_scaffold.cli import app as app_module

        def _boom(_argv: object = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _boom)
        assert _run_cli([]) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Progress rendering
# ---------------------------------------------------------------------------

class TestDescribe:
    @pytest.mark.parametrize(
        ("event", "expected"),
        [
            (StepEvent(ScaffoldState.DIRS_CREATED, "finished"), "Created directories"),
            (
                StepEvent(ScaffoldState.MODULE_INITIALIZED, "started", "example.com/x"),
                "Initializing module example.com/x",
            ),
            (StepEvent(ScaffoldState.DEPS_INSTALLED, "started", "gorm.io/gorm"), "Fetching gorm.io/gorm"),
            (StepEvent(ScaffoldState.DEPS_INSTALLED, "finished"), "Installed dependencies"),
            (StepEvent(ScaffoldState.DONE, "finished"), "Wrote README.md"),
        ],
    )
    def test_labels(self, event: StepEvent, expected: str) -> None:
        assert describe(event) == expected


class TestRichStepHook:
    def test_finished_lines_are_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        with RichStepHook() as hook:
            hook(StepEvent(ScaffoldState.DIRS_CREATED, "started"))
            hook(StepEvent(ScaffoldState.DIRS_CREATED, "finished"))
        assert "Created directories" in capsys.readouterr().err

    def test_stop_is_idempotent(self) -> None:
        hook = RichStepHook()
        hook.stop()
        hook.stop()


def test_strip_markup() -> None:
    assert strip_markup("[bold red]Error:[/bold red] boom") == "Error: boom"
