"""Ordering of imports inside one group.

``sort_group`` is the ordering algorithm: it is pure, deterministic and
never mutates its inputs. It composes three policies:

1. natural alphabetical order of the module name (default)
2. order by module name length, ascending or descending, with an ascending
   lexical tie-break
3. namespace-first partitioning, applied before either of the above

``GroupSorter`` binds a configuration and adds checks that report, rather
than apply, the expected order.
"""
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

from grouporder.core.config import SortConfiguration
from grouporder.core.diff import generate_order_diff
from grouporder.core.results import BatchResult, Result
from grouporder.imports.comparators import OrderKey, order_key_for
from grouporder.imports.records import ImportRecord

logger = logging.getLogger(__name__)


def partition_namespace(
    records: Iterable[ImportRecord],
) -> tuple[list[ImportRecord], list[ImportRecord]]:
    """Split records into (namespace-style, everything else).

    Relative input order is kept within each partition.
    """
    namespace: list[ImportRecord] = []
    rest: list[ImportRecord] = []
    for record in records:
        (namespace if record.is_namespace else rest).append(record)
    return namespace, rest


def sort_partition(records: Iterable[ImportRecord], key: OrderKey) -> list[ImportRecord]:
    """Stable sort of ``records`` by ``key``."""
    return sorted(records, key=key)


def sort_group(
    records: Sequence[ImportRecord],
    config: SortConfiguration,
) -> list[ImportRecord]:
    """Return the records of one group in their final order.

    Parameters
    ----------
    records : Sequence[ImportRecord]
        The group's records, in source order. May be empty and may contain
        duplicate module names.
    config : SortConfiguration
        Ordering options for the group.

    Returns
    -------
    list[ImportRecord]
        A new list holding the same record objects, reordered. When sorting
        is disabled this is the input order.

    Examples
    --------
    >>> records = [ImportRecord("file10"), ImportRecord("file2"), ImportRecord("file1")]
    >>> [r.source_module for r in sort_group(records, SortConfiguration())]
    ['file1', 'file2', 'file10']
    """
    if not config.sort_enabled:
        return list(records)

    key = order_key_for(config.length_mode)

    if not config.group_namespace_first:
        return sort_partition(records, key)

    namespace, rest = partition_namespace(records)
    return sort_partition(namespace, key) + sort_partition(rest, key)


def _order_line(record: ImportRecord) -> str:
    # Equal module names only swap across the namespace split, so the kind
    # keeps their lines distinct.
    if record.statement:
        return record.statement
    return f"{record.source_module}  # {record.specifier_kind.value}"


def _order_lines(records: Sequence[ImportRecord]) -> list[str]:
    return [_order_line(record) for record in records]


class GroupSorter:
    """Sort import groups with one configuration.

    Parameters
    ----------
    config : SortConfiguration | None
        Ordering options. Defaults to ``SortConfiguration()``.

    Examples
    --------
    >>> sorter = GroupSorter(SortConfiguration(length_mode=LengthMode.DESCENDING))
    >>> ordered = sorter.sort(records)
    >>> result = sorter.check(records, name="thirdparty")
    >>> if not result:
    ...     print(result.diff)
    """

    def __init__(self, config: SortConfiguration | None = None) -> None:
        self.config = config or SortConfiguration()

    def __repr__(self) -> str:
        return f"GroupSorter({self.config!r})"

    def sort(self, records: Sequence[ImportRecord]) -> list[ImportRecord]:
        """Return ``records`` in their final order."""
        logger.debug("Sorting %d import(s) with %s", len(records), self.config)
        return sort_group(records, self.config)

    def sort_groups(
        self,
        groups: Mapping[str, Sequence[ImportRecord]],
    ) -> dict[str, list[ImportRecord]]:
        """Sort every group independently, keeping the groups' order."""
        logger.debug("Sorting %d group(s)", len(groups))
        return {name: self.sort(records) for name, records in groups.items()}

    def check(self, records: Sequence[ImportRecord], name: str = "group") -> Result:
        """Report whether ``records`` are already in their final order.

        Parameters
        ----------
        records : Sequence[ImportRecord]
            The group's records in their current order.
        name : str
            Group name, used in messages and as the diff key.

        Returns
        -------
        Result
            Successful when the order is already correct. ``data`` always
            holds the expected order; ``diff`` shows the reordering needed
            otherwise.
        """
        expected = self.sort(records)
        if all(a is b for a, b in zip(records, expected)):
            return Result(
                success=True,
                message=f"Imports in {name} already sorted",
                data=expected,
            )

        diff = generate_order_diff(_order_lines(records), _order_lines(expected), name)
        return Result(
            success=False,
            message=f"Imports in {name} are not sorted",
            data=expected,
            diff=diff,
        )

    def check_groups(self, groups: Mapping[str, Sequence[ImportRecord]]) -> BatchResult:
        """Check every group; the batch succeeds only if all groups do."""
        logger.debug("Checking %d group(s)", len(groups))
        return BatchResult(
            results={name: self.check(records, name) for name, records in groups.items()}
        )
