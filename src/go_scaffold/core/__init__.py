"""Core / service layer: pipeline orchestration and pure data.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or process I/O; side effects go through the
  protocols in :mod:`go_scaffold.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from go_scaffold.core.models import (
    DEFAULT_LAYOUT,
    ProjectOptions,
    ScaffoldLayout,
    ScaffoldResult,
    ScaffoldState,
    StepEvent,
)
from go_scaffold.core.protocols import CommandRunner, ProjectWriter
from go_scaffold.core.scaffold_service import ScaffoldService
from go_scaffold.core.validation import validate_options

__all__: list[str] = [
    "DEFAULT_LAYOUT",
    "CommandRunner",
    "ProjectOptions",
    "ProjectWriter",
    "ScaffoldLayout",
    "ScaffoldResult",
    "ScaffoldService",
    "ScaffoldState",
    "StepEvent",
    "validate_options",
]
