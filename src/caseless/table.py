"""Case-folding table: parsing, representation and lookup.

The table is built from rows in the ``CaseFolding.txt`` format of the Unicode
Character Database::

    <code>; <status>; <mapping>; # <name>

Each source code point can carry up to four rows, one per status. ``lookup``
resolves them with a fixed priority chain driven by ``FoldingOptions``.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .config import DEFAULT_OPTIONS, FoldingOptions
from .errors import CaseFoldingDataError

# Case folding a single code point can give up to this many code points.
MAX_FOLDED_CODE_POINTS = 3
MAX_CODE_POINT = 0x10FFFF

_VERSION_RE = re.compile(r"^# CaseFolding-(\d+)\.(\d+)\.(\d+)\.txt$")

_DATA_PACKAGE = "caseless"
_DATA_FILE = "data/CaseFolding.txt"


class CaseStatus(str, Enum):
    """Status letters of ``CaseFolding.txt``."""

    COMMON = "C"
    FULL = "F"
    SIMPLE = "S"
    TURKIC = "T"


@dataclass(frozen=True)
class CaseFoldingEntry:
    """One row of the case-folding table."""

    source: int
    status: CaseStatus
    mapping: tuple[int, ...]

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "status", CaseStatus(self.status))
        except ValueError as e:
            raise CaseFoldingDataError(f"unknown status {self.status!r}") from e
        object.__setattr__(self, "mapping", tuple(self.mapping))
        if not 0 <= self.source <= MAX_CODE_POINT:
            raise CaseFoldingDataError(f"source U+{self.source:04X} is outside the Unicode range")
        if not self.mapping:
            raise CaseFoldingDataError(f"U+{self.source:04X} has an empty mapping")
        limit = MAX_FOLDED_CODE_POINTS if self.status is CaseStatus.FULL else 1
        if len(self.mapping) > limit:
            raise CaseFoldingDataError(
                f"U+{self.source:04X} ({self.status.name.lower()}) maps to "
                f"{len(self.mapping)} code points, at most {limit} allowed"
            )
        for cp in self.mapping:
            if not 0 < cp <= MAX_CODE_POINT:
                raise CaseFoldingDataError(f"U+{self.source:04X} maps to invalid code point {cp:#x}")


def _parse_row(body: str, lineno: int) -> CaseFoldingEntry:
    fields = [f.strip() for f in body.split(";")]
    if len(fields) < 3:
        raise CaseFoldingDataError(f"line {lineno}: expected '<code>; <status>; <mapping>;'")
    code, status, mapping = fields[:3]
    try:
        source = int(code, 16)
        targets = tuple(int(cp, 16) for cp in mapping.split())
    except ValueError as e:
        raise CaseFoldingDataError(f"line {lineno}: bad hex value ({e})") from e
    try:
        case_status = CaseStatus(status)
    except ValueError as e:
        raise CaseFoldingDataError(f"line {lineno}: unknown status {status!r}") from e
    try:
        return CaseFoldingEntry(source, case_status, targets)
    except CaseFoldingDataError as e:
        raise CaseFoldingDataError(f"line {lineno}: {e}") from e


def parse_case_folding(
    lines: Iterable[str],
) -> tuple[list[CaseFoldingEntry], tuple[int, int, int] | None]:
    """Parse ``CaseFolding.txt`` rows.

    Returns the entries in file order and the Unicode version announced by the
    ``# CaseFolding-X.Y.Z.txt`` header line, if there is one.
    """
    entries: list[CaseFoldingEntry] = []
    version: tuple[int, int, int] | None = None
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if version is None:
            m = _VERSION_RE.match(line)
            if m:
                version = (int(m.group(1)), int(m.group(2)), int(m.group(3)))
                continue
        body = line.split("#", 1)[0].strip()
        if not body:
            continue
        entries.append(_parse_row(body, lineno))
    return entries, version


def _resolve(
    rows: dict[CaseStatus, tuple[int, ...]], use_full: bool, use_turkic: bool
) -> tuple[int, ...] | None:
    if use_turkic and CaseStatus.TURKIC in rows:
        return rows[CaseStatus.TURKIC]
    if CaseStatus.COMMON in rows:
        return rows[CaseStatus.COMMON]
    if use_full and CaseStatus.FULL in rows:
        return rows[CaseStatus.FULL]
    return rows.get(CaseStatus.SIMPLE)


class CaseFoldingTable:
    """Immutable mapping from code point to its status-tagged folding rows.

    Safe to share between threads: nothing is written after ``__init__``.
    """

    def __init__(
        self,
        entries: Iterable[CaseFoldingEntry],
        unicode_version: tuple[int, int, int] | None = None,
    ) -> None:
        rows: dict[int, dict[CaseStatus, tuple[int, ...]]] = {}
        for entry in entries:
            slot = rows.setdefault(entry.source, {})
            if entry.status in slot:
                raise CaseFoldingDataError(
                    f"duplicate {entry.status.name.lower()} entry for U+{entry.source:04X}"
                )
            slot[entry.status] = entry.mapping

        for source, slot in rows.items():
            if CaseStatus.COMMON in slot and (CaseStatus.FULL in slot or CaseStatus.SIMPLE in slot):
                raise CaseFoldingDataError(
                    f"U+{source:04X} has a common entry alongside a full or simple entry"
                )

        self._rows = rows
        self.unicode_version = unicode_version

        # One str.translate map per (use_full_mapping, use_turkic_mapping).
        self._translations: dict[tuple[bool, bool], Mapping[int, str]] = {}
        for use_full in (True, False):
            for use_turkic in (False, True):
                table: dict[int, str] = {}
                for source, slot in rows.items():
                    mapping = _resolve(slot, use_full, use_turkic)
                    if mapping is not None and mapping != (source,):
                        table[source] = "".join(map(chr, mapping))
                self._translations[(use_full, use_turkic)] = MappingProxyType(table)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> CaseFoldingTable:
        entries, version = parse_case_folding(lines)
        return cls(entries, version)

    @classmethod
    def from_file(cls, path: str | Path) -> CaseFoldingTable:
        with open(path, encoding="utf-8") as f:
            return cls.from_lines(f)

    def lookup(self, codepoint: int, options: FoldingOptions = DEFAULT_OPTIONS) -> tuple[int, ...]:
        """Return the folded code points for ``codepoint``.

        Code points without an applicable row map to themselves.
        """
        slot = self._rows.get(codepoint)
        if slot is None:
            return (codepoint,)
        mapping = _resolve(slot, options.use_full_mapping, options.use_turkic_mapping)
        return mapping if mapping is not None else (codepoint,)

    def translation(self, options: FoldingOptions = DEFAULT_OPTIONS) -> Mapping[int, str]:
        """Return the read-only ``str.translate`` map for ``options``."""
        return self._translations[options.key]

    def entries_for(self, codepoint: int) -> list[CaseFoldingEntry]:
        slot = self._rows.get(codepoint, {})
        return [CaseFoldingEntry(codepoint, status, slot[status]) for status in CaseStatus if status in slot]

    def status_counts(self) -> dict[CaseStatus, int]:
        counts = Counter(status for slot in self._rows.values() for status in slot)
        return {status: counts.get(status, 0) for status in CaseStatus}

    def __iter__(self) -> Iterator[CaseFoldingEntry]:
        for source in sorted(self._rows):
            yield from self.entries_for(source)

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        version = ".".join(map(str, self.unicode_version)) if self.unicode_version else "unknown"
        return f"<CaseFoldingTable {len(self)} code points, Unicode {version}>"


@lru_cache(maxsize=None)
def default_table() -> CaseFoldingTable:
    """Return the packaged table, loading it on first use."""
    data = resources.files(_DATA_PACKAGE).joinpath(_DATA_FILE)
    with data.open("r", encoding="utf-8") as f:
        return CaseFoldingTable.from_lines(f)


def data_version() -> tuple[int, int, int] | None:
    """Return the Unicode version of the packaged data from its header line only."""
    data = resources.files(_DATA_PACKAGE).joinpath(_DATA_FILE)
    with data.open("r", encoding="utf-8") as f:
        for line in f:
            if not line.startswith("#"):
                break
            m = _VERSION_RE.match(line.rstrip("\r\n"))
            if m:
                return (int(m.group(1)), int(m.group(2)), int(m.group(3)))
    return None
