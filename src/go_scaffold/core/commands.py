"""Go toolchain command construction (pure)."""

from __future__ import annotations

DEFAULT_GO_EXECUTABLE: str = "go"


def module_init_command(module: str, *, go: str = DEFAULT_GO_EXECUTABLE) -> list[str]:
    """Return the argv that creates ``go.mod`` for *module*."""
    return [go, "mod", "init", module]


def fetch_command(dependency: str, *, go: str = DEFAULT_GO_EXECUTABLE) -> list[str]:
    """Return the argv that adds *dependency* (latest version) to ``go.mod``."""
    return [go, "get", "-u", dependency]
