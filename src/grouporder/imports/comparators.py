"""Ordering keys for import records.

Each policy is a plain key function over ImportRecord, suitable for the
stable ``sorted`` builtin.
"""
from __future__ import annotations

from typing import Any, Callable

from grouporder.core.config import LengthMode
from grouporder.imports.collation import LEXICAL, NATURAL
from grouporder.imports.records import ImportRecord

OrderKey = Callable[[ImportRecord], Any]


def natural_order_key(record: ImportRecord) -> Any:
    """Natural alphabetical order of the source module ("file2" < "file10")."""
    return NATURAL.key(record.source_module)


def length_order_key(descending: bool = False) -> OrderKey:
    """Build a key that orders by module name length.

    Equal lengths always fall back to ascending lexical collation, whatever
    the length direction.

    Parameters
    ----------
    descending : bool
        Put longer module names first.
    """

    def key(record: ImportRecord) -> Any:
        length = len(record.source_module)
        return (-length if descending else length, LEXICAL.key(record.source_module))

    return key


def order_key_for(mode: LengthMode) -> OrderKey:
    """Return the base ordering key selected by ``mode``."""
    if mode is LengthMode.ASCENDING:
        return length_order_key()
    if mode is LengthMode.DESCENDING:
        return length_order_key(descending=True)
    return natural_order_key
