"""Namespace resolution and source rewriting.

Key pieces:
    ProjectRootLocator           - finds the solution/project root
    NamespaceBuilder             - folder hierarchy -> dotted namespace
    replace_region / rewrite_file - marker-delimited substitution
    BaseClassInheritanceInjector - base-class inheritance for view models
"""

from .builder import NamespaceBuilder, NamespacePair
from .inheritance import BaseClassInheritanceInjector
from .locator import ProjectRoot, ProjectRootLocator
from .rewriter import (
    find_declaration_namespace,
    read_declaration_namespace,
    replace_region,
    rewrite_file,
)

__all__ = [
    "ProjectRoot",
    "ProjectRootLocator",
    "NamespaceBuilder",
    "NamespacePair",
    "replace_region",
    "rewrite_file",
    "find_declaration_namespace",
    "read_declaration_namespace",
    "BaseClassInheritanceInjector",
]
