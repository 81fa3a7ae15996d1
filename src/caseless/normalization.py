"""Normalization forms consumed by the caseless matchers."""

from __future__ import annotations

import unicodedata
from typing import Protocol


class NormalizationProvider(Protocol):
    """Supplies canonical and compatibility decomposition."""

    def nfd(self, text: str) -> str: ...

    def nfkd(self, text: str) -> str: ...


class UnicodedataNormalizer:
    """NFD/NFKD backed by the interpreter's ``unicodedata`` module."""

    def nfd(self, text: str) -> str:
        return unicodedata.normalize("NFD", text)

    def nfkd(self, text: str) -> str:
        return unicodedata.normalize("NFKD", text)

    @property
    def unicode_version(self) -> str:
        return unicodedata.unidata_version


DEFAULT_NORMALIZER = UnicodedataNormalizer()
