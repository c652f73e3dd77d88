"""Infrastructure layer — filesystem, processes, and the Go toolchain.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~go_scaffold.exceptions.GoScaffoldError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from go_scaffold.infra.command_runner import SubprocessCommandRunner
from go_scaffold.infra.filesystem import LocalProjectWriter
from go_scaffold.infra.go_toolchain import GoStatus, detect_go

__all__: list[str] = [
    "GoStatus",
    "LocalProjectWriter",
    "SubprocessCommandRunner",
    "detect_go",
]
