"""Shared pytest fixtures for the avalonia-scaffold test suite.

Provides reusable fixtures for:
- A test logger and default configuration
- Sample ``dotnet new`` output (markup, code-behind, plain class)
- Temporary Avalonia project trees
- A fake template generator that writes the sample output to disk
- Mock subprocess helpers
"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from avalonia_scaffold.config import Config
from avalonia_scaffold.generator.dotnet import GeneratorResult


# ---------------------------------------------------------------------------
# Sample generator output
# ---------------------------------------------------------------------------

USER_CONTROL_AXAML = textwrap.dedent("""\
    <UserControl xmlns="https://github.com/avaloniaui"
                 xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml"
                 xmlns:d="http://schemas.microsoft.com/expression/blend/2008"
                 xmlns:mc="http://schemas.openxmlformats.org/markup-compatibility/2006"
                 mc:Ignorable="d" d:DesignWidth="800" d:DesignHeight="450"
                 x:Class="AvaloniaApplication1.__NAME__">
      Welcome to Avalonia!
    </UserControl>
    """)

CODE_BEHIND = textwrap.dedent("""\
    using Avalonia;
    using Avalonia.Controls;
    using Avalonia.Markup.Xaml;

    namespace AvaloniaApplication1;

    public partial class __NAME__ : UserControl
    {
        public __NAME__()
        {
            InitializeComponent();
        }
    }
    """)

TEMPLATED_CONTROL_AXAML = textwrap.dedent("""\
    <Styles xmlns="https://github.com/avaloniaui"
            xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml"
            xmlns:controls="using:AvaloniaApplication1">
      <Design.PreviewWith>
        <controls:__NAME__ />
      </Design.PreviewWith>
    </Styles>
    """)

STYLES_AXAML = textwrap.dedent("""\
    <Styles xmlns="https://github.com/avaloniaui"
            xmlns:x="http://schemas.microsoft.com/winfx/2006/xaml">
    </Styles>
    """)

CLASS_CS = textwrap.dedent("""\
    namespace AvaloniaApplication1;

    public class __NAME__
    {

    }
    """)

VIEW_MODEL_BASE_CS = textwrap.dedent("""\
    using CommunityToolkit.Mvvm.ComponentModel;

    namespace App.ViewModels;

    public class ViewModelBase : ObservableObject
    {
    }
    """)


# ---------------------------------------------------------------------------
# Basics
# ---------------------------------------------------------------------------

@pytest.fixture
def logger() -> logging.Logger:
    """Logger handed to components under test."""
    return logging.getLogger("avalonia_scaffold.tests")


@pytest.fixture
def config() -> Config:
    """Default configuration."""
    return Config()


@pytest.fixture
def sources() -> dict[str, str]:
    """Sample generator output keyed by kind (``__NAME__`` is a placeholder)."""
    return {
        "user_control": USER_CONTROL_AXAML,
        "code_behind": CODE_BEHIND,
        "templated_control": TEMPLATED_CONTROL_AXAML,
        "styles": STYLES_AXAML,
        "class": CLASS_CS,
        "view_model_base": VIEW_MODEL_BASE_CS,
    }


# ---------------------------------------------------------------------------
# Project trees
# ---------------------------------------------------------------------------

@pytest.fixture
def avalonia_project(tmp_path: Path) -> Path:
    """A single-project Avalonia app without a solution file.

    Layout::

        App/
            App.csproj
            Views/UserControls/
            ViewModels/ViewModelBase.cs
    """
    root = tmp_path / "App"
    (root / "Views" / "UserControls").mkdir(parents=True)
    (root / "ViewModels").mkdir()
    (root / "App.csproj").write_text("<Project Sdk=\"Microsoft.NET.Sdk\" />\n", encoding="utf-8")
    (root / "ViewModels" / "ViewModelBase.cs").write_text(VIEW_MODEL_BASE_CS, encoding="utf-8")
    yield root


@pytest.fixture
def solution_workspace(tmp_path: Path) -> Path:
    """A workspace whose solution lives one level down: ``repo/src/App.sln``."""
    root = tmp_path / "repo" / "src"
    (root / "App" / "Views").mkdir(parents=True)
    (root / "App.sln").write_text("", encoding="utf-8")
    (root / "App" / "App.csproj").write_text("", encoding="utf-8")
    yield tmp_path / "repo"


# ---------------------------------------------------------------------------
# Fake template generator
# ---------------------------------------------------------------------------

class FakeGenerator:
    """Stands in for ``DotnetTemplateGenerator`` by writing sample output."""

    def __init__(self, forced: bool = False, class_text: str = CLASS_CS):
        self.forced = forced
        self.class_text = class_text
        self.calls: list[tuple[str, str, Path]] = []

    async def generate(self, template_id: str, name: str, cwd: str | Path) -> GeneratorResult:
        directory = Path(cwd)
        self.calls.append((template_id, name, directory))

        def write(filename: str, text: str) -> None:
            (directory / filename).write_text(text.replace("__NAME__", name), encoding="utf-8")

        if template_id == "class":
            write(f"{name}.cs", self.class_text)
        elif template_id in ("avalonia.styles", "avalonia.resource"):
            write(f"{name}.axaml", STYLES_AXAML)
        elif template_id == "avalonia.templatedcontrol":
            write(f"{name}.axaml", TEMPLATED_CONTROL_AXAML)
            write(f"{name}.axaml.cs", CODE_BEHIND)
        else:
            write(f"{name}.axaml", USER_CONTROL_AXAML)
            write(f"{name}.axaml.cs", CODE_BEHIND)

        return GeneratorResult(command=f"dotnet new {template_id} -n {name}", forced=self.forced)


@pytest.fixture
def fake_generator() -> FakeGenerator:
    """Fake template generator writing sample output into the target directory."""
    return FakeGenerator()


@pytest.fixture
def fake_generator_factory():
    """Factory for fake generators with custom behaviour."""
    return FakeGenerator


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
