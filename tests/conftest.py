"""Shared pytest fixtures and configuration for the go-scaffold test suite.

Guidelines
----------
* No network access and no real ``go`` invocations in any test.
* Processes are replaced by :class:`RecordingRunner` at the
  ``CommandRunner`` seam.
* Filesystem tests run inside ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from go_scaffold.core.models import ProjectOptions
from go_scaffold.core.scaffold_service import ScaffoldService
from go_scaffold.infra.filesystem import LocalProjectWriter


class RecordingRunner:
    """Fake :class:`CommandRunner` that records every invocation.

    ``go mod init`` behaves like the real toolchain in one respect: it
    writes ``go.mod`` and fails when one already exists.

    Parameters
    ----------
    fail_on:
        Map of argument to exit status; any invocation containing that
        argument returns the given status.
    """

    def __init__(self, fail_on: dict[str, int] | None = None) -> None:
        self.fail_on: dict[str, int] = dict(fail_on or {})
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, args: Sequence[str], *, cwd: Path) -> int:
        argv = list(args)
        self.calls.append((argv, cwd))

        for needle, code in self.fail_on.items():
            if needle in argv:
                return code

        if argv[1:3] == ["mod", "init"]:
            manifest = cwd / "go.mod"
            if manifest.exists():
                return 1
            manifest.write_text(f"module {argv[3]}\n", encoding="utf-8")
        return 0

    @property
    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def service(runner: RecordingRunner) -> ScaffoldService:
    return ScaffoldService(runner, LocalProjectWriter())


@pytest.fixture()
def options(tmp_path: Path) -> ProjectOptions:
    return ProjectOptions(
        directory=str(tmp_path / "api"),
        module="github.com/acme/api",
        env_format="env",
    )
