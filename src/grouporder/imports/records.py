"""Import records handed to the group sorter.

An ImportRecord describes one import statement that an upstream stage has
already classified into a group. The sorter only reorders references to
records; it never builds or changes them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SpecifierKind(Enum):
    """Kind of binding an import specifier introduces."""

    DEFAULT = "default"
    NAMESPACE = "namespace"
    NAMED = "named"


@dataclass(frozen=True)
class Span:
    """Original position of a statement in its source.

    Attributes
    ----------
    start : int
        Start offset or 1-based line number, depending on the producer.
    end : int
        End offset or 1-based line number.
    """

    start: int
    end: int


@dataclass(frozen=True)
class ImportRecord:
    """One import statement inside a group.

    Attributes
    ----------
    source_module : str
        The module path being imported. This is the only ordering key.
    specifiers : tuple[SpecifierKind, ...]
        Kinds of the statement's specifiers, in source order. May be empty.
    span : Span | None
        Where the statement came from. Never consulted when ordering.
    statement : str
        Source text of the statement, for collaborators that rewrite code.
    """

    source_module: str
    specifiers: tuple[SpecifierKind, ...] = ()
    span: Span | None = None
    statement: str = field(default="", compare=False)

    @property
    def is_namespace(self) -> bool:
        """True if at least one specifier binds a whole module."""
        return SpecifierKind.NAMESPACE in self.specifiers

    @property
    def specifier_kind(self) -> SpecifierKind:
        """The record's overall kind.

        NAMESPACE wins over any other specifier; otherwise the first
        specifier's kind is used, and an empty list counts as DEFAULT.
        """
        if self.is_namespace:
            return SpecifierKind.NAMESPACE
        if self.specifiers:
            return self.specifiers[0]
        return SpecifierKind.DEFAULT
