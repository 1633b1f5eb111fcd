"""Locale-style and natural string collation.

Comparison happens in three levels, in the manner of a Unicode collator:

1. Primary: characters are bucketed into classes (punctuation and symbols,
   then digits, then letters) and letters compare case- and
   accent-insensitively. In numeric mode a run of digits is a single unit
   weighted by its integer value, so "file2" sorts before "file10".
2. Secondary: the case-folded text with its accents kept, so an unaccented
   letter sorts before its accented forms and "Resume" before "résumé".
3. Tertiary: lowercase sorts before uppercase and the raw text breaks
   whatever is left.

The result does not depend on the process locale.
"""
from __future__ import annotations

import re
import unicodedata

_DIGIT_RUN = re.compile(r"(\d+)")

_CLASS_SYMBOL = 0
_CLASS_DIGIT = 1
_CLASS_LETTER = 2

Unit = tuple[int, int | str]


def _fold(char: str) -> str:
    """Case-fold a character and strip combining marks."""
    decomposed = unicodedata.normalize("NFKD", char.casefold())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped or decomposed


def _char_unit(char: str) -> Unit:
    if char.isspace() or unicodedata.category(char)[0] in ("P", "S"):
        return (_CLASS_SYMBOL, char)
    if char.isdigit():
        return (_CLASS_DIGIT, unicodedata.digit(char))
    return (_CLASS_LETTER, _fold(char))


class Collator:
    """Compare strings the way a locale-aware collator would.

    Parameters
    ----------
    numeric : bool
        If True, runs of digits compare by their numeric value
        ("natural" sort). If False, digits compare one character at a time.

    Examples
    --------
    >>> natural = Collator(numeric=True)
    >>> sorted(["file10", "file2", "file1"], key=natural.key)
    ['file1', 'file2', 'file10']
    >>> Collator().compare("a", "B")
    -1
    """

    def __init__(self, numeric: bool = False) -> None:
        self.numeric = numeric

    def __repr__(self) -> str:
        return f"Collator(numeric={self.numeric!r})"

    def primary(self, text: str) -> tuple[Unit, ...]:
        """Return the primary collation units of ``text``."""
        units: list[Unit] = []
        if self.numeric:
            for index, part in enumerate(_DIGIT_RUN.split(text)):
                if not part:
                    continue
                if index % 2:
                    units.append((_CLASS_DIGIT, int(part)))
                else:
                    units.extend(_char_unit(c) for c in part)
        else:
            units.extend(_char_unit(c) for c in text)
        return tuple(units)

    def key(self, text: str) -> tuple[tuple[Unit, ...], str, str, str]:
        """Sort key for ``text``; usable directly with ``sorted``."""
        return (self.primary(text), text.casefold(), text.swapcase(), text)

    def compare(self, a: str, b: str) -> int:
        """Three-way comparison: -1 if a < b, 0 if equal, 1 if a > b."""
        key_a = self.key(a)
        key_b = self.key(b)
        if key_a < key_b:
            return -1
        if key_a > key_b:
            return 1
        return 0


NATURAL = Collator(numeric=True)
LEXICAL = Collator(numeric=False)
