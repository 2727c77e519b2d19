"""Marker-delimited source rewriting.

Generated files are edited by literal substring search rather than parsing:
the text strictly between a start marker and the next end marker is
replaced, and everything else is kept byte for byte. A missing marker is a
hard error so a changed generator output format never yields a silently
corrupted file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..errors import MarkerNotFoundError, SourceFileError
from ..logging_config import fields
from ..utils import read_source, write_source

# Declarations start a line; a "// namespace X" comment never matches.
NAMESPACE_DECLARATION = re.compile(r"^[ \t]*namespace\s+([^\s;{]+)", re.MULTILINE)


def load_source(path: str | Path) -> str:
    """Read a source file, reporting I/O failures as :class:`SourceFileError`."""
    try:
        return read_source(path)
    except OSError as exc:
        raise SourceFileError(path, exc.strerror or str(exc)) from exc


def store_source(path: str | Path, text: str) -> None:
    """Write a source file, reporting I/O failures as :class:`SourceFileError`."""
    try:
        write_source(path, text)
    except OSError as exc:
        raise SourceFileError(path, exc.strerror or str(exc)) from exc


def find_region(text: str, start_marker: str, end_marker: str) -> tuple[int, int]:
    """Return the half-open ``[start, end)`` span between the two markers.

    Raises:
        MarkerNotFoundError: If either marker is absent.
    """
    marker_index = text.find(start_marker)
    if marker_index == -1:
        raise MarkerNotFoundError(start_marker)

    start = marker_index + len(start_marker)
    end = text.find(end_marker, start)
    if end == -1:
        raise MarkerNotFoundError(end_marker)
    return start, end


def replace_region(text: str, start_marker: str, end_marker: str, replacement: str) -> str:
    """Replace the text between *start_marker* and the next *end_marker*.

    Example::

        replace_region('x:Class="Old.Foo"', 'x:Class="', '"', "New.Foo")
        -> 'x:Class="New.Foo"'
    """
    start, end = find_region(text, start_marker, end_marker)
    return text[:start] + replacement + text[end:]


def rewrite_file(
    path: str | Path,
    start_marker: str,
    end_marker: str,
    replacement: str,
    logger: logging.Logger,
) -> None:
    """Apply :func:`replace_region` to a file and write it back.

    Nothing is written when a marker is missing.

    Raises:
        MarkerNotFoundError: If either marker is absent from the file.
        SourceFileError: If the file cannot be read or written.
    """
    file_path = Path(path)
    logger.debug(
        "Changing file content",
        extra=fields(path=str(file_path), start_marker=start_marker, replacement=replacement),
    )
    content = load_source(file_path)
    try:
        modified = replace_region(content, start_marker, end_marker, replacement)
    except MarkerNotFoundError as exc:
        raise MarkerNotFoundError(exc.marker, file_path) from exc
    store_source(file_path, modified)
    logger.debug("File content changed", extra=fields(path=str(file_path)))


def find_declaration_namespace(text: str) -> str | None:
    """Return the first ``namespace <name>`` declared in *text*, if any."""
    match = NAMESPACE_DECLARATION.search(text)
    return match.group(1) if match else None


def read_declaration_namespace(path: str | Path, logger: logging.Logger) -> str | None:
    """Read a file and return its declared namespace, if any."""
    namespace = find_declaration_namespace(load_source(path))
    logger.debug("Declared namespace", extra=fields(path=str(path), namespace=namespace))
    return namespace
