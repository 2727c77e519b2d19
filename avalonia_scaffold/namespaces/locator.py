"""Project root discovery.

The root anchors namespace computation: it is the directory holding a
solution (``.sln``) or project (``.csproj``) marker file. The start directory
is checked first; after that its subtree is searched depth-first, pre-order,
in sorted name order so the result is reproducible.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..config import Config
from ..errors import RootNotFoundError
from ..logging_config import fields


@dataclass(frozen=True)
class ProjectRoot:
    """Directory that anchors namespace computation."""

    path: Path
    is_solution_root: bool
    project_name: str = ""


class ProjectRootLocator:
    """Finds the nearest solution/project root from an arbitrary directory."""

    def __init__(self, config: Config, logger: logging.Logger):
        self.config = config
        self.logger = logger

    def locate(self, start_dir: str | Path) -> ProjectRoot:
        """Locate the project root for *start_dir*.

        Raises:
            RootNotFoundError: If no directory in the subtree holds a marker.
        """
        start = Path(start_dir)
        self.logger.debug("Finding solution or project directory", extra=fields(start_dir=str(start)))

        if self._contains_marker(start):
            self.logger.debug("Marker found in start directory", extra=fields(path=str(start)))
            return self._analyze(start)

        found = self._search(start)
        if found is None:
            self.logger.error("Solution or project directory not found", extra=fields(start_dir=str(start)))
            raise RootNotFoundError(start)

        self.logger.debug("Marker found in subdirectory", extra=fields(path=str(found)))
        return self._analyze(found)

    def _search(self, directory: Path) -> Path | None:
        for child in self._subdirectories(directory):
            if self._contains_marker(child):
                return child
            found = self._search(child)
            if found is not None:
                return found
        return None

    def _subdirectories(self, directory: Path) -> list[Path]:
        try:
            with os.scandir(directory) as entries:
                names = sorted(
                    entry.name for entry in entries if entry.is_dir(follow_symlinks=False)
                )
        except OSError as exc:
            self.logger.warning(
                "Cannot list directory, skipping",
                extra=fields(path=str(directory), error=str(exc)),
            )
            return []
        return [directory / name for name in names]

    def _marker_files(self, directory: Path) -> list[str]:
        try:
            with os.scandir(directory) as entries:
                return sorted(
                    entry.name
                    for entry in entries
                    if entry.name.endswith(self.config.marker_suffixes)
                    and not entry.is_dir()
                )
        except OSError as exc:
            self.logger.warning(
                "Cannot check directory for markers",
                extra=fields(path=str(directory), error=str(exc)),
            )
            return []

    def _contains_marker(self, directory: Path) -> bool:
        return bool(self._marker_files(directory))

    def _analyze(self, directory: Path) -> ProjectRoot:
        markers = self._marker_files(directory)
        is_solution = any(name.endswith(self.config.solution_suffix) for name in markers)
        project_name = ""
        if not is_solution:
            for name in markers:
                if name.endswith(self.config.project_suffix):
                    project_name = name[: -len(self.config.project_suffix)]
                    break

        root = ProjectRoot(path=directory, is_solution_root=is_solution, project_name=project_name)
        self.logger.debug(
            "Solution analysis result",
            extra=fields(is_solution_root=is_solution, project_name=project_name),
        )
        return root
