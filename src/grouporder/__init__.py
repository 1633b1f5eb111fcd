"""
grouporder - ordering of import statements within a group.

A small library that decides the final order of import statements that
another tool has already bucketed into one group (e.g. "third-party
packages"). Ordering combines natural alphabetical sort, optional sort by
module name length, and optional prioritization of namespace-style imports.

Example
-------
>>> from grouporder import GroupSorter, ImportRecord, SortConfiguration, SpecifierKind
>>>
>>> records = [
...     ImportRecord("zod"),
...     ImportRecord("react", (SpecifierKind.NAMESPACE,)),
...     ImportRecord("axios"),
... ]
>>> sorter = GroupSorter(SortConfiguration(group_namespace_first=True))
>>> [r.source_module for r in sorter.sort(records)]
['react', 'axios', 'zod']

Classes
-------
GroupSorter
    Sorts groups with one configuration and checks existing order.

SortConfiguration
    Immutable ordering options: sort_enabled, group_namespace_first,
    length_mode.

ImportRecord
    One import statement: module name, specifier kinds, optional span.

Result
    Outcome of a group check or a file collection: success status, message,
    payload and diff. These operations never raise exceptions.

ErrorResult
    Result class for failed operations.

BatchResult
    Check outcomes of several groups, keyed by group name.
"""
from __future__ import annotations

from grouporder.core import (
    BatchResult,
    ConfigError,
    ErrorResult,
    LengthMode,
    Result,
    SortConfiguration,
    config_from_mapping,
    load_config,
)
from grouporder.imports import (
    Collator,
    GroupSorter,
    ImportRecord,
    SpecifierKind,
    Span,
    collect_records,
    partition_namespace,
    records_from_source,
    sort_group,
)

__all__ = [
    "BatchResult",
    "Collator",
    "ConfigError",
    "ErrorResult",
    "GroupSorter",
    "ImportRecord",
    "LengthMode",
    "Result",
    "SortConfiguration",
    "Span",
    "SpecifierKind",
    "collect_records",
    "config_from_mapping",
    "load_config",
    "partition_namespace",
    "records_from_source",
    "sort_group",
]

__version__ = "0.1.0"
