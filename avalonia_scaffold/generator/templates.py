"""Avalonia template catalogue.

Maps each component type to the ``dotnet new`` template that produces it and
to the markers that delimit the namespace inside the generated files.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TemplateType(str, Enum):
    WINDOW = "window"
    USER_CONTROL = "user-control"
    TEMPLATED_CONTROL = "templated-control"
    STYLES = "styles"
    RESOURCE_DICTIONARY = "resource-dictionary"


class TemplateConfig(BaseModel):
    """How a component type is generated and post-processed."""

    type_name: str = Field(..., description="Display name, e.g. 'UserControl'")
    dotnet_template: str = Field(..., description="Short name passed to 'dotnet new'")
    supports_view_model: bool = Field(default=False)
    requires_namespace_update: bool = Field(default=False)


class NamespaceMarkers(BaseModel):
    """Start/end delimiters around the namespace in a generated file pair."""

    markup_start: str
    markup_end: str
    code_start: str = "namespace "
    code_end: str = ";"
    # TemplatedControl markup references the code namespace, not the class.
    markup_uses_code_namespace: bool = False


TEMPLATES: dict[TemplateType, TemplateConfig] = {
    TemplateType.WINDOW: TemplateConfig(
        type_name="Window",
        dotnet_template="avalonia.window",
        supports_view_model=True,
        requires_namespace_update=True,
    ),
    TemplateType.USER_CONTROL: TemplateConfig(
        type_name="UserControl",
        dotnet_template="avalonia.usercontrol",
        supports_view_model=True,
        requires_namespace_update=True,
    ),
    TemplateType.TEMPLATED_CONTROL: TemplateConfig(
        type_name="TemplatedControl",
        dotnet_template="avalonia.templatedcontrol",
        supports_view_model=False,
        requires_namespace_update=True,
    ),
    TemplateType.STYLES: TemplateConfig(
        type_name="Styles",
        dotnet_template="avalonia.styles",
    ),
    TemplateType.RESOURCE_DICTIONARY: TemplateConfig(
        type_name="ResourceDictionary",
        dotnet_template="avalonia.resource",
    ),
}

CLASS_TEMPLATE = "class"


def get_template_config(template_type: TemplateType) -> TemplateConfig:
    """Return the catalogue entry for *template_type*."""
    return TEMPLATES[TemplateType(template_type)]


def namespace_markers(template_type: TemplateType) -> NamespaceMarkers:
    """Return the namespace delimiters used by *template_type*'s output."""
    if TemplateType(template_type) is TemplateType.TEMPLATED_CONTROL:
        return NamespaceMarkers(
            markup_start='xmlns:controls="using:',
            markup_end='">',
            markup_uses_code_namespace=True,
        )
    return NamespaceMarkers(markup_start='x:Class="', markup_end='"')
