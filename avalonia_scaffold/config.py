"""Avalonia scaffold configuration.

Centralised, typed configuration for the scaffolder. Settings use Pydantic v2
models so they are validated at construction time and can be serialised to
JSON or read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Config(BaseModel):
    """Global scaffolder configuration.

    Instances are created once by the CLI entry point (or by tests) and then
    handed to every component that needs them.
    """

    solution_suffix: str = Field(default=".sln", description="Solution marker file suffix")
    project_suffix: str = Field(default=".csproj", description="Project marker file suffix")
    views_dir: str = Field(default="Views")
    view_models_dir: str = Field(default="ViewModels")
    base_class_file: str = Field(
        default="ViewModelBase.cs",
        description="File whose presence makes generated view models inherit from it",
    )
    dotnet_binary: str = Field(default="dotnet")
    generator_timeout: int = Field(
        default=120, ge=5, description="Template generator timeout in seconds"
    )
    log_level: str = Field(default="INFO")

    @field_validator("solution_suffix", "project_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"marker suffix must look like '.ext', got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            AVALONIA_SCAFFOLD_SOLUTION_SUFFIX, AVALONIA_SCAFFOLD_PROJECT_SUFFIX,
            AVALONIA_SCAFFOLD_BASE_CLASS_FILE, AVALONIA_SCAFFOLD_DOTNET,
            AVALONIA_SCAFFOLD_TIMEOUT, AVALONIA_SCAFFOLD_LOG_LEVEL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("AVALONIA_SCAFFOLD_SOLUTION_SUFFIX"):
            kwargs["solution_suffix"] = os.environ["AVALONIA_SCAFFOLD_SOLUTION_SUFFIX"]
        if os.environ.get("AVALONIA_SCAFFOLD_PROJECT_SUFFIX"):
            kwargs["project_suffix"] = os.environ["AVALONIA_SCAFFOLD_PROJECT_SUFFIX"]
        if os.environ.get("AVALONIA_SCAFFOLD_BASE_CLASS_FILE"):
            kwargs["base_class_file"] = os.environ["AVALONIA_SCAFFOLD_BASE_CLASS_FILE"]
        if os.environ.get("AVALONIA_SCAFFOLD_DOTNET"):
            kwargs["dotnet_binary"] = os.environ["AVALONIA_SCAFFOLD_DOTNET"]
        if os.environ.get("AVALONIA_SCAFFOLD_TIMEOUT"):
            kwargs["generator_timeout"] = int(os.environ["AVALONIA_SCAFFOLD_TIMEOUT"])
        if os.environ.get("AVALONIA_SCAFFOLD_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["AVALONIA_SCAFFOLD_LOG_LEVEL"]
        return cls(**kwargs)

    @property
    def marker_suffixes(self) -> tuple[str, str]:
        """Suffixes that identify a solution or project root."""
        return (self.solution_suffix, self.project_suffix)
