"""Diff generation for import order.

Order diffs take one line per record (see ``GroupSorter.check``) so the
difference between the current and the expected order reads like a source
diff.
"""
from __future__ import annotations

import difflib
from typing import Sequence


def generate_order_diff(
    current: Sequence[str],
    expected: Sequence[str],
    name: str,
    context_lines: int = 3,
) -> str:
    """Generate a unified diff between two orderings of the same lines.

    Parameters
    ----------
    current : Sequence[str]
        Lines in their current order.
    expected : Sequence[str]
        Lines in the expected order.
    name : str
        Group name (used in the diff header).
    context_lines : int
        Number of context lines to include around changes.

    Returns
    -------
    str
        Unified diff string, or empty string if the orders match.

    Examples
    --------
    >>> print(generate_order_diff(["zod", "axios"], ["axios", "zod"], "thirdparty"))
    --- a/thirdparty
    +++ b/thirdparty
    @@ -1,2 +1,2 @@
    +axios
     zod
    -axios
    """
    if list(current) == list(expected):
        return ""

    diff = difflib.unified_diff(
        [f"{line}\n" for line in current],
        [f"{line}\n" for line in expected],
        fromfile=f"a/{name}",
        tofile=f"b/{name}",
        n=context_lines,
    )
    return "".join(diff)


def combine_diffs(diffs: dict[str, str]) -> str:
    """Combine per-group diffs into a single diff string.

    Empty diffs are dropped and the rest are joined in group-name order so
    the output is stable.
    """
    non_empty = {name: d for name, d in diffs.items() if d}
    if not non_empty:
        return ""

    return "\n".join(d for _, d in sorted(non_empty.items()))
