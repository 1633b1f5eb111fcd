"""Build import records from Python source using LibCST.

This is an upstream adapter for the group sorter: it turns the module-level
import statements of a file into ImportRecords, in source order, with their
line spans. Deciding which group a record belongs to is left to the caller.

``import x`` and ``import x as y`` bind a whole module, so their aliases are
namespace specifiers. ``from x import y`` binds names out of a module, so its
aliases (including ``*``) are named specifiers.
"""
from __future__ import annotations

import logging
from pathlib import Path

import libcst as cst
from libcst.metadata import MetadataWrapper, PositionProvider

from grouporder.core.results import ErrorResult, Result
from grouporder.imports.records import ImportRecord, SpecifierKind, Span

logger = logging.getLogger(__name__)


class ImportRecordCollector(cst.CSTVisitor):
    """Collect module-level imports as ImportRecords.

    Imports nested in ``if``/``try``/``with`` blocks at module level are
    collected; imports inside function or class bodies are not.
    """

    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self) -> None:
        self.records: list[ImportRecord] = []

    def visit_FunctionDef(self, node: cst.FunctionDef) -> bool:
        return False

    def visit_ClassDef(self, node: cst.ClassDef) -> bool:
        return False

    def visit_Import(self, node: cst.Import) -> bool:
        modules = [_get_full_name(alias.name) for alias in node.names]
        self._add(
            node,
            modules[0] if modules else "",
            tuple(SpecifierKind.NAMESPACE for _ in modules),
        )
        return False

    def visit_ImportFrom(self, node: cst.ImportFrom) -> bool:
        dots = "." * len(node.relative)
        module = _get_full_name(node.module) if node.module else ""

        if isinstance(node.names, cst.ImportStar):
            specifiers: tuple[SpecifierKind, ...] = (SpecifierKind.NAMED,)
        else:
            specifiers = tuple(SpecifierKind.NAMED for _ in node.names)

        self._add(node, f"{dots}{module}", specifiers)
        return False

    def _add(
        self,
        node: cst.Import | cst.ImportFrom,
        source_module: str,
        specifiers: tuple[SpecifierKind, ...],
    ) -> None:
        pos = self.get_metadata(PositionProvider, node)
        self.records.append(
            ImportRecord(
                source_module=source_module,
                specifiers=specifiers,
                span=Span(pos.start.line, pos.end.line),
                statement=_node_to_code(node),
            )
        )


def records_from_source(source: str | bytes) -> list[ImportRecord]:
    """Parse ``source`` and return its module-level imports as records.

    Bytes are decoded by LibCST, honouring any encoding declaration.

    Raises
    ------
    libcst.ParserSyntaxError
        If ``source`` is not valid Python.
    SyntaxError, UnicodeDecodeError
        If ``source`` is bytes that do not decode.

    Examples
    --------
    >>> [r.source_module for r in records_from_source("import zod\\nfrom . import a\\n")]
    ['zod', '.']
    """
    wrapper = MetadataWrapper(cst.parse_module(source))
    collector = ImportRecordCollector()
    wrapper.visit(collector)
    return collector.records


def collect_records(path: Path) -> Result:
    """Collect the import records of a file.

    Parameters
    ----------
    path : Path
        Path to the Python file.

    Returns
    -------
    Result
        On success ``data`` is the list of records. Missing files, paths that
        cannot be read (directories, permission errors) and parse failures
        produce an ErrorResult.
    """
    if not path.exists():
        logger.warning("File not found: %s", path)
        return ErrorResult(
            message=f"File not found: {path}",
            operation="collect_records",
            target_repr=str(path),
        )

    try:
        source = path.read_bytes()
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return ErrorResult(
            message=f"Failed to read file: {e}",
            exception=e,
            operation="collect_records",
            target_repr=str(path),
        )

    try:
        records = records_from_source(source)
    except (cst.ParserSyntaxError, SyntaxError, UnicodeDecodeError) as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return ErrorResult(
            message=f"Failed to parse file: {e}",
            exception=e,
            operation="collect_records",
            target_repr=str(path),
        )

    logger.debug("Collected %d import(s) from %s", len(records), path)
    return Result(
        success=True,
        message=f"Collected {len(records)} import(s) from {path}",
        data=records,
    )


def _get_full_name(node: cst.BaseExpression) -> str:
    """Get the full dotted name from an attribute or name node."""
    if isinstance(node, cst.Name):
        return node.value
    elif isinstance(node, cst.Attribute):
        return f"{_get_full_name(node.value)}.{node.attr.value}"
    return ""


def _node_to_code(node: cst.CSTNode) -> str:
    """Convert an import node back to source code."""
    return cst.Module(body=[cst.SimpleStatementLine(body=[node])]).code.strip()
