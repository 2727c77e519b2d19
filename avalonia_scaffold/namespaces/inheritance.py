"""Base-class inheritance for generated view models.

When the view-models folder holds a conventionally named base-class file
(``ViewModelBase.cs`` by default), a freshly generated view model is made to
inherit from the class it declares, and a ``using`` directive is added when
the two files live in different namespaces.

The edit is not idempotent: injecting twice into files from different
namespaces adds the ``using`` directive again, so callers run it exactly
once per generated file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..config import Config
from ..errors import DeclarationNotFoundError
from ..logging_config import fields
from .rewriter import (
    NAMESPACE_DECLARATION,
    find_declaration_namespace,
    load_source,
    store_source,
)

# A class declaration at the start of a line, after optional attributes and
# modifiers. Comment lines never match.
CLASS_DECLARATION = re.compile(
    r"^[ \t]*(?:\[[^\]\n]*\][ \t]*)*"
    r"(?:(?:public|internal|protected|private|abstract|sealed|static|partial|unsafe)\s+)*"
    r"class\s+([A-Za-z_]\w*)",
    re.MULTILINE,
)


def _newline_of(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def base_class_name(base_text: str, base_file: Path) -> str:
    """Name of the class declared in the base file, else the file stem."""
    match = CLASS_DECLARATION.search(base_text)
    return match.group(1) if match else base_file.stem


def add_using(text: str, namespace: str) -> str:
    """Insert ``using <namespace>;`` on its own line before the namespace declaration.

    Text without a namespace declaration is returned unchanged.
    """
    match = NAMESPACE_DECLARATION.search(text)
    if match is None:
        return text
    newline = _newline_of(text)
    using = f"using {namespace};{newline}{newline}"
    return text[: match.start()] + using + text[match.start():]


def add_inheritance(text: str, class_name: str, base_name: str) -> str:
    """Rewrite `` class <class_name> ... {`` to inherit from *base_name*.

    Raises:
        DeclarationNotFoundError: If the class token or its opening brace is missing.
    """
    declaration = f" class {class_name}"
    match = re.search(re.escape(declaration) + r"\b", text)
    if match is None:
        raise DeclarationNotFoundError(declaration)

    brace = text.find("{", match.end())
    if brace == -1:
        raise DeclarationNotFoundError(declaration + " {")

    newline = _newline_of(text)
    return text[: match.start()] + f"{declaration} : {base_name}{newline}" + text[brace:]


class BaseClassInheritanceInjector:
    """Makes a generated class inherit from the project's base class, if any."""

    def __init__(self, config: Config, logger: logging.Logger):
        self.config = config
        self.logger = logger

    def inject(
        self,
        generated_file_path: str | Path,
        entity_class_name: str,
        base_file_directory: str | Path,
    ) -> bool:
        """Add the inheritance clause (and ``using``) to *generated_file_path*.

        Args:
            generated_file_path: The freshly generated ``.cs`` file.
            entity_class_name: Class declared in that file.
            base_file_directory: Folder expected to hold the base-class file.

        Returns:
            ``True`` if the file was rewritten, ``False`` if there is no
            base-class file and nothing was touched.

        Raises:
            DeclarationNotFoundError: If the class declaration is missing; the
                file is left unmodified.
            SourceFileError: If either file cannot be read or written.
        """
        generated = Path(generated_file_path)
        base_file = Path(base_file_directory) / self.config.base_class_file
        self.logger.debug(
            "Checking for base class inheritance",
            extra=fields(path=str(generated), base_file=str(base_file)),
        )

        if not base_file.is_file():
            self.logger.debug("Base class file not found, skipping inheritance")
            return False

        base_text = load_source(base_file)
        content = load_source(generated)

        base_namespace = find_declaration_namespace(base_text)
        own_namespace = find_declaration_namespace(content)
        base_name = base_class_name(base_text, base_file)
        self.logger.debug(
            "Namespace comparison",
            extra=fields(base_namespace=base_namespace, namespace=own_namespace, base_class=base_name),
        )

        if base_namespace and own_namespace and base_namespace != own_namespace:
            content = add_using(content, base_namespace)

        try:
            content = add_inheritance(content, entity_class_name, base_name)
        except DeclarationNotFoundError as exc:
            raise DeclarationNotFoundError(exc.declaration, generated) from exc

        store_source(generated, content)
        self.logger.info(
            "Base class inheritance added",
            extra=fields(path=str(generated), base_class=base_name),
        )
        return True
