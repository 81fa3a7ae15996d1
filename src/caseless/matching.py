"""Default, canonical and compatibility caseless matching.

Each match mode is a key function: two strings match when their keys are
equal. Keys are built by composing ``fold`` with NFD/NFKD as laid out in
section 3.13 of the Unicode Standard (D144-D146).
"""

from __future__ import annotations

from typing import Callable, Protocol

from .config import DEFAULT_OPTIONS, FoldingOptions
from .folding import fold
from .normalization import DEFAULT_NORMALIZER, NormalizationProvider
from .table import CaseFoldingTable


class CaselessKey(Protocol):
    def __call__(
        self,
        text: str,
        options: FoldingOptions = ...,
        *,
        table: CaseFoldingTable | None = ...,
        normalizer: NormalizationProvider | None = ...,
    ) -> str: ...


_REGISTRY: dict[str, CaselessKey] = {}


def register(name: str) -> Callable[[CaselessKey], CaselessKey]:
    """Decorator that registers a caseless key function under ``name``."""

    def decorator(func: CaselessKey) -> CaselessKey:
        _REGISTRY[name] = func
        return func

    return decorator


def get_matcher(name: str) -> CaselessKey:
    """Return the key function registered for match mode ``name``."""
    if name not in _REGISTRY:
        available = ", ".join(_REGISTRY)
        raise KeyError(f"Unknown match mode {name!r}. Available: {available}")
    return _REGISTRY[name]


def list_matchers() -> list[dict[str, str]]:
    """Return name and summary for every registered match mode, in registration order."""
    return [
        {"name": name, "description": (func.__doc__ or "").strip().splitlines()[0]}
        for name, func in _REGISTRY.items()
    ]


@register("default")
def default_caseless_key(
    text: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> str:
    """toCasefold(X)"""
    return fold(text, options, table=table)


@register("canonical")
def canonical_caseless_key(
    text: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> str:
    """NFD(toCasefold(NFD(X)))

    The inner NFD lets the table see canonical code points; the outer one
    re-orders combining marks the mapping may have introduced.
    """
    norm = normalizer or DEFAULT_NORMALIZER
    return norm.nfd(fold(norm.nfd(text), options, table=table))


@register("compatibility")
def compatibility_caseless_key(
    text: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> str:
    """NFKD(toCasefold(NFKD(toCasefold(NFD(X)))))

    The second fold catches characters only exposed by compatibility
    decomposition, e.g. U+210C BLACK-LETTER CAPITAL H decomposes to "H".
    """
    norm = normalizer or DEFAULT_NORMALIZER
    first = fold(norm.nfd(text), options, table=table)
    return norm.nfkd(fold(norm.nfkd(first), options, table=table))


def caseless_key(
    text: str,
    mode: str = "default",
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> str:
    """Return the comparison key of ``text`` under match mode ``mode``."""
    return get_matcher(mode)(text, options, table=table, normalizer=normalizer)


def caseless_match(
    a: str,
    b: str,
    mode: str = "default",
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> bool:
    """Return True if ``a`` and ``b`` match under match mode ``mode``."""
    key = get_matcher(mode)
    return (
        key(a, options, table=table, normalizer=normalizer)
        == key(b, options, table=table, normalizer=normalizer)
    )


def default_caseless_match(
    a: str,
    b: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
) -> bool:
    """Return True if ``a`` and ``b`` are equal after one folding pass."""
    return fold(a, options, table=table) == fold(b, options, table=table)


def canonical_caseless_match(
    a: str,
    b: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> bool:
    """Return True if ``a`` and ``b`` are canonical caseless matches."""
    return caseless_match(a, b, "canonical", options, table=table, normalizer=normalizer)


def compatibility_caseless_match(
    a: str,
    b: str,
    options: FoldingOptions = DEFAULT_OPTIONS,
    *,
    table: CaseFoldingTable | None = None,
    normalizer: NormalizationProvider | None = None,
) -> bool:
    """Return True if ``a`` and ``b`` are compatibility caseless matches."""
    return caseless_match(a, b, "compatibility", options, table=table, normalizer=normalizer)
