"""Avalonia scaffold -- component generation with folder-derived namespaces.

Quick usage::

    from avalonia_scaffold import Config, ScaffoldOrchestrator, ScaffoldRequest, TemplateType

    request = ScaffoldRequest(
        template_type=TemplateType.USER_CONTROL,
        name="SomeUserControl",
        create_path=Path("/proj/Views/UserControls"),
        workspace_path=Path("/proj"),
        create_view_model=True,
    )
    result = await ScaffoldOrchestrator(Config()).create(request)
"""

from .config import Config
from .errors import (
    DeclarationNotFoundError,
    GeneratorError,
    MarkerNotFoundError,
    NamespaceNotConstructibleError,
    RootNotFoundError,
    ScaffoldError,
    SourceFileError,
)
from .generator import DotnetTemplateGenerator, TemplateType
from .scaffold import ScaffoldOrchestrator, ScaffoldRequest, ScaffoldResult

__all__ = [
    "Config",
    "ScaffoldError",
    "RootNotFoundError",
    "NamespaceNotConstructibleError",
    "MarkerNotFoundError",
    "DeclarationNotFoundError",
    "GeneratorError",
    "SourceFileError",
    "DotnetTemplateGenerator",
    "TemplateType",
    "ScaffoldOrchestrator",
    "ScaffoldRequest",
    "ScaffoldResult",
]
