"""Import ordering for grouporder.

Provides:
- Import records and specifier kinds
- Natural and locale-style collation
- Ordering keys (natural, by length)
- The group sorter and its checking facade
- A LibCST adapter that builds records from Python source
"""
from __future__ import annotations

from grouporder.imports.collation import Collator
from grouporder.imports.collector import collect_records, records_from_source
from grouporder.imports.records import ImportRecord, SpecifierKind, Span
from grouporder.imports.sorter import GroupSorter, partition_namespace, sort_group

__all__ = [
    "Collator",
    "GroupSorter",
    "ImportRecord",
    "SpecifierKind",
    "Span",
    "collect_records",
    "partition_namespace",
    "records_from_source",
    "sort_group",
]
