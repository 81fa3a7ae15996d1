"""Default case folding of strings and code point sequences."""

from __future__ import annotations

from typing import Iterable, Iterator

from .config import DEFAULT_OPTIONS, FoldingOptions
from .table import CaseFoldingTable, default_table


def fold(
    text: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
) -> str:
    """Return the case-folded form of ``text``.

    Every code point is replaced by its table mapping, in order. With the
    default options this is full folding, so the result can be longer than
    the input (``"ß"`` folds to ``"ss"``).
    """
    if table is None:
        table = default_table()
    return text.translate(table.translation(options))


def fold_codepoints(
    codepoints: Iterable[int],
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
) -> list[int]:
    """Fold a sequence of code points."""
    if table is None:
        table = default_table()
    folded: list[int] = []
    for cp in codepoints:
        folded.extend(table.lookup(cp, options))
    return folded


def iter_fold(
    chars: Iterable[str],
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
) -> Iterator[str]:
    """Lazily fold an iterable of characters, one output character at a time."""
    if table is None:
        table = default_table()
    for ch in chars:
        for cp in table.lookup(ord(ch), options):
            yield chr(cp)
