"""Avalonia component scaffolding.

Drives one scaffold request end to end:

1. GENERATE  -- ``dotnet new`` the component in the target directory.
2. NAMESPACE -- rewrite the markup and code-behind namespaces to match the
   folder hierarchy below the solution/project root.
3. VIEWMODEL -- optionally generate a companion view model in the mirrored
   ``ViewModels`` folder and make it inherit from ``ViewModelBase``.

Usage::

    avalonia-scaffold user-control SomeUserControl --path ./App/Views/UserControls
    python -m avalonia_scaffold window MainWindow --view-model
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import re
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, Field
from rich.prompt import Confirm, Prompt

from .config import LOG_LEVELS, Config
from .errors import (
    DeclarationNotFoundError,
    NamespaceNotConstructibleError,
    RootNotFoundError,
    ScaffoldError,
)
from .generator import (
    CLASS_TEMPLATE,
    DotnetTemplateGenerator,
    TemplateType,
    get_template_config,
    namespace_markers,
)
from .logging_config import fields, get_logger, setup_logging
from .namespaces import (
    BaseClassInheritanceInjector,
    NamespaceBuilder,
    ProjectRoot,
    ProjectRootLocator,
    rewrite_file,
)
from .utils import (
    console,
    ensure_dir,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# ---------------------------------------------------------------------------
# Request / result
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """A single scaffold command."""

    template_type: TemplateType
    name: str
    create_path: Path = Field(..., description="Directory the component is generated in")
    workspace_path: Path = Field(..., description="Where the project root search starts")
    create_view_model: bool = False


@dataclass
class ScaffoldResult:
    """Files produced by a scaffold request."""

    files: list[Path] = field(default_factory=list)
    view_model_path: Path | None = None
    warnings: list[str] = field(default_factory=list)
    forced: bool = False


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


def view_model_name(view_name: str) -> str:
    """``MainView`` -> ``MainViewModel``, ``MainWindow`` -> ``MainWindowViewModel``."""
    if view_name.lower().endswith("view"):
        return f"{view_name}Model"
    return f"{view_name}ViewModel"


def view_model_location(
    view_dir: str | Path, workspace: str | Path, config: Config
) -> tuple[Path, Path]:
    """Mirror a view directory into the view-models tree.

    The first ``Views`` segment (case-insensitive) below the workspace is
    swapped for ``ViewModels`` and the remaining subpath is kept::

        /proj/Views/UserControls -> (/proj/ViewModels/UserControls, /proj/ViewModels)

    Without a ``Views`` segment the view directory is used for both.

    Returns:
        ``(view_model_directory, view_models_root)``.
    """
    view_path = Path(view_dir)
    parts = view_path.parts
    workspace_parts = Path(workspace).parts
    first = len(workspace_parts) if parts[: len(workspace_parts)] == workspace_parts else 0

    for index in range(first, len(parts)):
        if parts[index].lower() == config.views_dir.lower():
            root = Path(*parts[:index]) / config.view_models_dir
            return root.joinpath(*parts[index + 1:]), root

    return view_path, view_path


def describe_error(exc: BaseException) -> str:
    """Translate an error into the message shown to the user."""
    if isinstance(exc, RootNotFoundError):
        return "No solution or project file found in workspace. Please open an Avalonia project."
    if isinstance(exc, NamespaceNotConstructibleError):
        return (
            "Could not determine namespace. "
            "Please make sure you're working in a valid project structure."
        )
    return str(exc)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldOrchestrator:
    """Runs the generate -> namespace -> view-model sequence.

    Steps are independent file writes: a failure in a later step never rolls
    back an earlier one. A view model whose class declaration cannot be
    found is reported as a warning, every other error propagates.
    """

    def __init__(
        self,
        config: Config,
        generator: DotnetTemplateGenerator | None = None,
        logger: logging.Logger | None = None,
        on_progress: Callable[[str], None] | None = None,
    ):
        self.config = config
        self.logger = logger or get_logger()
        self.generator = generator or DotnetTemplateGenerator(config, self.logger)
        self.locator = ProjectRootLocator(config, self.logger)
        self.namespaces = NamespaceBuilder(self.logger)
        self.injector = BaseClassInheritanceInjector(config, self.logger)
        self.on_progress = on_progress

    def _report(self, message: str) -> None:
        if self.on_progress:
            self.on_progress(message)

    async def create(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Scaffold the component described by *request*.

        Raises:
            ScaffoldError: For an invalid name or any failing step.
        """
        if not _IDENTIFIER.match(request.name):
            raise ScaffoldError(
                f"File name '{request.name}' is not valid. Please try again with a valid name."
            )

        template = get_template_config(request.template_type)
        result = ScaffoldResult()
        self.logger.info(
            "Creating template",
            extra=fields(template=template.type_name, name=request.name, path=str(request.create_path)),
        )

        self._report(f"Creating {template.type_name}...")
        generated = await self.generator.generate(
            template.dotnet_template, request.name, request.create_path
        )
        result.forced = generated.forced

        root: ProjectRoot | None = None
        if template.requires_namespace_update:
            self._report("Updating namespaces...")
            root = self.locator.locate(request.workspace_path)
            result.files.extend(
                self.update_namespaces(request.template_type, request.create_path, root, request.name)
            )
        else:
            result.files.append(Path(request.create_path) / f"{request.name}.axaml")

        if request.create_view_model:
            if template.supports_view_model:
                root = root or self.locator.locate(request.workspace_path)
                await self.create_view_model(request, root, result)
            else:
                message = f"{template.type_name} does not support a view model, skipped"
                self.logger.warning(message)
                result.warnings.append(message)

        self._report("Template created successfully!")
        self.logger.info("Template creation completed", extra=fields(files=[str(f) for f in result.files]))
        return result

    def update_namespaces(
        self, template_type: TemplateType, create_path: Path, root: ProjectRoot, name: str
    ) -> list[Path]:
        """Rewrite the namespaces of ``<name>.axaml`` and ``<name>.axaml.cs``."""
        pair = self.namespaces.build_pair(create_path, root, name)
        markers = namespace_markers(template_type)
        markup_file = Path(create_path) / f"{name}.axaml"
        code_file = Path(create_path) / f"{name}.axaml.cs"

        markup_namespace = pair.code_namespace if markers.markup_uses_code_namespace else pair.full_namespace
        rewrite_file(markup_file, markers.markup_start, markers.markup_end, markup_namespace, self.logger)
        rewrite_file(code_file, markers.code_start, markers.code_end, pair.code_namespace, self.logger)
        return [markup_file, code_file]

    async def create_view_model(
        self, request: ScaffoldRequest, root: ProjectRoot, result: ScaffoldResult
    ) -> Path:
        """Generate, namespace and wire up the companion view model."""
        self._report("Creating ViewModel...")
        directory, view_models_root = view_model_location(
            request.create_path, request.workspace_path, self.config
        )
        ensure_dir(directory)
        class_name = view_model_name(request.name)
        self.logger.debug(
            "ViewModel location",
            extra=fields(directory=str(directory), view_models_root=str(view_models_root), name=class_name),
        )

        generated = await self.generator.generate(CLASS_TEMPLATE, class_name, directory)
        result.forced = result.forced or generated.forced

        pair = self.namespaces.build_pair(directory, root, class_name)
        file_path = directory / f"{class_name}.cs"
        rewrite_file(file_path, "namespace ", ";", pair.code_namespace, self.logger)
        result.files.append(file_path)
        result.view_model_path = file_path

        try:
            self.injector.inject(file_path, class_name, view_models_root)
        except DeclarationNotFoundError as exc:
            self.logger.warning("ViewModel inheritance skipped", extra=fields(error=str(exc)))
            result.warnings.append(f"Could not add base class to {file_path.name}: {exc}")

        return file_path


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avalonia-scaffold",
        description="Avalonia UI Templates -- scaffold components with matching namespaces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  avalonia-scaffold window MainWindow --view-model\n"
            "  avalonia-scaffold user-control SomeUserControl --path ./App/Views/UserControls\n"
            "  avalonia-scaffold styles AppStyles --path ./App/Styles\n"
        ),
    )
    parser.add_argument(
        "template",
        choices=[t.value for t in TemplateType],
        help="Component type to create",
    )
    parser.add_argument("name", nargs="?", default=None, help="Component name (prompted if omitted)")
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Directory to create the component in (default: workspace)",
    )
    parser.add_argument(
        "--workspace", "-w",
        default=None,
        help="Workspace root where the project search starts (default: current directory)",
    )
    parser.add_argument(
        "--view-model",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also create a view model (asked interactively if omitted)",
    )
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``avalonia-scaffold`` / ``python -m avalonia_scaffold``."""
    args = _build_parser().parse_args(argv)

    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.log_level:
        config = Config(**{**config.model_dump(), "log_level": args.log_level})
    logger = setup_logging(config.log_level)

    template_type = TemplateType(args.template)
    template = get_template_config(template_type)

    create_view_model = args.view_model
    if create_view_model is None:
        create_view_model = template.supports_view_model and Confirm.ask(
            f"Would you like to create a ViewModel for your {template.type_name} as well?",
            default=False,
        )

    name = args.name or Prompt.ask(f"Choose a name for your {template.type_name}", default="")
    if not name:
        print_error("File name is not valid. Please try again with a valid name.")
        sys.exit(1)

    workspace = Path(args.workspace or Path.cwd()).resolve()
    create_path = Path(args.path).resolve() if args.path else workspace
    if not create_path.is_dir():
        print_error(f"Unable to find a suitable location to create the file: {create_path}")
        sys.exit(1)

    request = ScaffoldRequest(
        template_type=template_type,
        name=name,
        create_path=create_path,
        workspace_path=workspace,
        create_view_model=bool(create_view_model),
    )

    start = time.monotonic()
    try:
        with console.status("Avalonia UI Templates") as status:
            orchestrator = ScaffoldOrchestrator(config, logger=logger, on_progress=status.update)
            result = asyncio.run(orchestrator.create(request))
    except (ScaffoldError, OSError) as exc:
        logger.error("Error in template creation process", extra=fields(error=str(exc)))
        print_error(describe_error(exc))
        sys.exit(1)

    summary = {
        "Template": template.type_name,
        "Name": name,
        "Files": "\n".join(str(path) for path in result.files),
        "Elapsed": format_duration(time.monotonic() - start),
    }
    if result.forced:
        summary["Note"] = "Project not restored, --force was used"
    print_summary_table(summary, title="Scaffold")

    for warning in result.warnings:
        print_warning(warning)
    print_success("Template created successfully!")


if __name__ == "__main__":
    main()
