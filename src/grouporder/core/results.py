"""Outcomes of group checks and record collection.

Checks and file reads report through these values instead of raising:

- ``Result``: the outcome of one check or one collection.
- ``ErrorResult``: a collection that could not complete.
- ``BatchResult``: the per-group outcomes of ``GroupSorter.check_groups``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from grouporder.core.diff import combine_diffs


@dataclass
class Result:
    """Outcome of a single operation.

    Attributes
    ----------
    success : bool
        For a check, whether the group was already in order.
    message : str
        Human-readable summary.
    data : Any
        For ``GroupSorter.check``, the group's records in their expected
        order. For ``collect_records``, the records found in the file.
    diff : str | None
        For a failed check, the unified diff from the current order to the
        expected one. None otherwise.
    """

    success: bool
    message: str
    data: Any = None
    diff: str | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class ErrorResult(Result):
    """A collection that failed. Never successful.

    Attributes
    ----------
    exception : Exception | None
        The error that stopped the operation, if there was one.
    operation : str
        Name of the failed operation.
    target_repr : str
        What the operation was applied to, usually a file path.
    """

    success: bool = field(default=False, init=False)
    exception: Exception | None = None
    operation: str = ""
    target_repr: str = ""

    def raise_if_error(self) -> None:
        """Re-raise the stored exception, or a RuntimeError with the message."""
        if self.exception is not None:
            raise self.exception
        raise RuntimeError(self.message)


@dataclass
class BatchResult:
    """Check outcomes of several groups, keyed by group name.

    Examples
    --------
    >>> batch = GroupSorter().check_groups({"stdlib": stdlib, "thirdparty": third})
    >>> batch.unsorted
    ['thirdparty']
    >>> print(batch["thirdparty"].diff)
    """

    results: dict[str, Result] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """True if every group is in order (vacuously true when empty)."""
        return all(r.success for r in self.results.values())

    @property
    def partial_success(self) -> bool:
        """True if at least one group is in order."""
        return any(r.success for r in self.results.values())

    @property
    def unsorted(self) -> list[str]:
        """Names of the groups that are out of order, in check order."""
        return [name for name, r in self.results.items() if not r.success]

    @property
    def diffs(self) -> dict[str, str]:
        """Diff of each out-of-order group, keyed by group name."""
        return {name: r.diff for name, r in self.results.items() if r.diff}

    @property
    def diff(self) -> str | None:
        """All group diffs joined in group-name order, or None if there are none."""
        diffs = self.diffs
        return combine_diffs(diffs) if diffs else None

    def __getitem__(self, group: str) -> Result:
        return self.results[group]

    def __bool__(self) -> bool:
        return self.success

    def __len__(self) -> int:
        return len(self.results)
