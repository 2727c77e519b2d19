"""Error hierarchy for the scaffolder.

Every core operation fails explicitly with one of these instead of falling
back to a degraded value. The orchestration layer decides how to present
them (see ``avalonia_scaffold.scaffold.describe_error``).
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class RootNotFoundError(ScaffoldError):
    """Raised when no solution or project marker exists in the searched tree."""

    def __init__(self, start_dir: str | Path):
        self.start_dir = Path(start_dir)
        super().__init__(
            f"Solution or project file not found in workspace: {self.start_dir}"
        )


class NamespaceNotConstructibleError(ScaffoldError):
    """Raised when a namespace cannot be derived from the folder hierarchy."""


class MarkerNotFoundError(ScaffoldError):
    """Raised when a delimiter expected in generated text is missing."""

    def __init__(self, marker: str, path: str | Path | None = None):
        self.marker = marker
        self.path = Path(path) if path else None
        location = f" in {self.path}" if self.path else ""
        super().__init__(f"Marker {marker!r} not found{location}")


class DeclarationNotFoundError(ScaffoldError):
    """Raised when a class declaration cannot be located for inheritance."""

    def __init__(self, declaration: str, path: str | Path | None = None):
        self.declaration = declaration
        self.path = Path(path) if path else None
        location = f" in {self.path}" if self.path else ""
        super().__init__(f"Declaration {declaration.strip()!r} not found{location}")


class GeneratorError(ScaffoldError):
    """Raised when the external template generator fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


class SourceFileError(ScaffoldError):
    """Raised when a generated or base-class source file cannot be read or written."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not access {self.path}: {reason}")
