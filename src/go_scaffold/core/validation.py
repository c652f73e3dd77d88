"""Flag validation.

Pure checks over the three user-supplied strings.  Nothing here touches
the filesystem, so a rejected invocation leaves no trace on disk.
"""

from __future__ import annotations

import re

from go_scaffold.core.models import ENV_FORMATS, ProjectOptions
from go_scaffold.exceptions import ValidationError

_PHASE = "checking flags"


def _has_whitespace(value: str) -> bool:
    return any(ch.isspace() for ch in value)


def _last_component(path: str) -> str:
    return re.split(r"[\\/]", path.rstrip("/\\"))[-1]


def check_flags(values: dict[str, str]) -> None:
    """Reject empty or whitespace-containing flag values.

    Parameters
    ----------
    values:
        Mapping of flag name to raw value, used for error messages.

    Raises
    ------
    ValidationError
        On the first offending value.
    """
    for name, value in values.items():
        if not value:
            raise ValidationError(
                f"-{name} must not be empty.",
                hint="Example: go-scaffold -dir api -module github.com/acme/api",
                phase=_PHASE,
            )
        if _has_whitespace(value):
            raise ValidationError(
                f"-{name} must not contain whitespace: {value!r}",
                phase=_PHASE,
            )


def validate_options(directory: str, module: str, env_format: str) -> ProjectOptions:
    """Validate raw flags and return an immutable :class:`ProjectOptions`.

    The env format is checked first, then all three values are checked
    for emptiness and whitespace, and finally the directory must not be
    the current directory, a parent, or the filesystem root.
    """
    if env_format not in ENV_FORMATS:
        raise ValidationError(
            f"Unknown env format {env_format!r}.",
            hint=f"Use one of: {', '.join(ENV_FORMATS)}",
            phase=_PHASE,
        )

    check_flags({"dir": directory, "module": module, "env": env_format})
    if _last_component(directory) in ("", ".", ".."):
        raise ValidationError(
            f"-dir must name a new project directory, not {directory!r}.",
            hint="Rollback deletes the project directory on failure.",
            phase=_PHASE,
        )
    return ProjectOptions(directory=directory, module=module, env_format=env_format)
