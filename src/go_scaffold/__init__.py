"""go-scaffold — Go web-service project scaffolding.

Creates a directory skeleton, initializes a Go module, fetches the
service dependencies, and marks the project complete.
"""

from go_scaffold.version import __version__

__all__: list[str] = ["__version__"]
