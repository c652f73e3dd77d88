"""Domain models for go-scaffold.

All models are **frozen** dataclasses or enums, immutable value objects
that carry zero I/O.  The default project layout lives here as a module
constant and is passed explicitly into the service, never mutated.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

ENV_FORMATS: tuple[str, ...] = ("env", "json")
"""Recognised values for the env-file format flag."""

DEFAULT_ENV_FORMAT: str = "env"

README_FILENAME: str = "README.md"
README_CONTENT: str = "Project generated by go-scaffold.\n"

MARKER_FILENAME: str = ".go-scaffold"
"""Lifecycle file whose presence marks a completed scaffold."""

MARKER_CONTENT: str = "complete\n"

ENV_PLACEHOLDER: str = "{env}"


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class ScaffoldState(enum.Enum):
    """Linear pipeline states plus the two failure terminals."""

    PARSED = "parsed"
    VALIDATED = "validated"
    DIRS_CREATED = "dirs_created"
    MODULE_INITIALIZED = "module_initialized"
    DEPS_INSTALLED = "deps_installed"
    FILES_CREATED = "files_created"
    DONE = "done"
    ROLLED_BACK = "rolled_back"
    ROLLBACK_SKIPPED = "rollback_skipped"


# ---------------------------------------------------------------------------
# Static layout
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScaffoldLayout:
    """What a scaffolded project contains.

    Paths are relative to the project root and use ``/`` separators.
    Exactly one required file may carry the ``{env}`` placeholder, which
    is replaced by the env format at resolution time.
    """

    subdirectories: tuple[str, ...]
    dependencies: tuple[str, ...]
    required_files: tuple[str, ...]

    def resolve_required_files(self, env_format: str) -> tuple[str, ...]:
        """Return :attr:`required_files` with the env suffix substituted."""
        return tuple(
            name.replace(ENV_PLACEHOLDER, env_format) for name in self.required_files
        )


DEFAULT_LAYOUT = ScaffoldLayout(
    subdirectories=(
        "config",
        "database",
        "errors",
        "handlers",
        "models",
        "services",
    ),
    dependencies=(
        "github.com/gin-gonic/gin",
        "gorm.io/gorm",
        "gorm.io/driver/postgres",
        "github.com/spf13/viper",
    ),
    required_files=(
        "main.go",
        "errors/errors.go",
        "config/config.{env}",
    ),
)


# ---------------------------------------------------------------------------
# Validated input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProjectOptions:
    """Flags after validation; read-only for the rest of the run."""

    directory: str
    module: str
    env_format: str = DEFAULT_ENV_FORMAT

    @property
    def root(self) -> Path:
        """Project root, relative to the working directory unless absolute."""
        return Path(self.directory)


# ---------------------------------------------------------------------------
# Progress and outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StepEvent:
    """Progress notification emitted by the scaffold service.

    ``state`` is the state the step leads to once it finishes.
    """

    state: ScaffoldState
    status: Literal["started", "finished"]
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Outcome of a successful scaffold run."""

    root: Path
    state: ScaffoldState
    files: tuple[Path, ...] = field(default=())
