"""External template generation.

Key classes:
    DotnetTemplateGenerator - runs ``dotnet new`` with the not-restored retry
    TemplateType            - supported Avalonia component types
    TemplateConfig          - per-type generation settings
"""

from .dotnet import DotnetTemplateGenerator, GeneratorResult
from .templates import (
    CLASS_TEMPLATE,
    TEMPLATES,
    NamespaceMarkers,
    TemplateConfig,
    TemplateType,
    get_template_config,
    namespace_markers,
)

__all__ = [
    "DotnetTemplateGenerator",
    "GeneratorResult",
    "CLASS_TEMPLATE",
    "TEMPLATES",
    "NamespaceMarkers",
    "TemplateConfig",
    "TemplateType",
    "get_template_config",
    "namespace_markers",
]
