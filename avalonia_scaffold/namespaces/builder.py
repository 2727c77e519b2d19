"""Namespace construction from the folder hierarchy."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from ..errors import NamespaceNotConstructibleError
from ..logging_config import fields
from .locator import ProjectRoot


@dataclass(frozen=True)
class NamespacePair:
    """Namespaces used when rewriting a generated file pair.

    ``full_namespace`` ends with the entity name and goes into markup
    ``x:Class`` declarations; ``code_namespace`` drops the last segment and
    goes into C# ``namespace`` declarations.
    """

    full_namespace: str
    code_namespace: str

    @classmethod
    def from_full(cls, namespace: str) -> "NamespacePair":
        code = namespace.rsplit(".", 1)[0] if "." in namespace else namespace
        return cls(full_namespace=namespace, code_namespace=code)


class NamespaceBuilder:
    """Turns ``(target_dir, root, entity_name)`` into a dotted namespace."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def build(self, target_dir: str | Path, root: ProjectRoot, entity_name: str) -> str:
        """Build the full namespace for *entity_name* living in *target_dir*.

        Raises:
            NamespaceNotConstructibleError: If *target_dir* lies outside the
                root or the resulting namespace is empty.
        """
        relative = os.path.relpath(Path(target_dir), root.path)
        segments = [part for part in re.split(r"[\\/]", relative) if part and part != "."]
        if ".." in segments:
            raise NamespaceNotConstructibleError(
                f"Namespace not found: {target_dir} is outside {root.path}"
            )

        namespace = ".".join(segments)
        namespace = f"{namespace}.{entity_name}" if namespace else entity_name

        if not root.is_solution_root and root.project_name:
            namespace = f"{root.project_name}.{namespace}"

        if not namespace:
            raise NamespaceNotConstructibleError("Namespace not found.")

        self.logger.debug("Namespace constructed", extra=fields(namespace=namespace))
        return namespace

    def build_pair(self, target_dir: str | Path, root: ProjectRoot, entity_name: str) -> NamespacePair:
        """Build both the markup and the code namespace."""
        return NamespacePair.from_full(self.build(target_dir, root, entity_name))
