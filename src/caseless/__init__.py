"""Unicode default case folding and caseless matching."""

from .config import DEFAULT_OPTIONS, FoldingOptions
from .errors import CaseFoldingDataError, CaselessError, MalformedTextError
from .folding import fold, fold_codepoints, iter_fold
from .matching import (
    canonical_caseless_key,
    canonical_caseless_match,
    caseless_key,
    caseless_match,
    compatibility_caseless_key,
    compatibility_caseless_match,
    default_caseless_key,
    default_caseless_match,
    get_matcher,
    list_matchers,
)
from .normalization import NormalizationProvider, UnicodedataNormalizer
from .table import CaseFoldingEntry, CaseFoldingTable, CaseStatus, data_version, default_table
from .text import decode_text, ensure_text

UNICODE_VERSION = data_version()

__all__ = [
    "DEFAULT_OPTIONS",
    "UNICODE_VERSION",
    "CaseFoldingDataError",
    "CaseFoldingEntry",
    "CaseFoldingTable",
    "CaseStatus",
    "CaselessError",
    "FoldingOptions",
    "MalformedTextError",
    "NormalizationProvider",
    "UnicodedataNormalizer",
    "canonical_caseless_key",
    "canonical_caseless_match",
    "caseless_key",
    "caseless_match",
    "compatibility_caseless_key",
    "compatibility_caseless_match",
    "decode_text",
    "default_caseless_key",
    "default_caseless_match",
    "data_version",
    "default_table",
    "ensure_text",
    "fold",
    "fold_codepoints",
    "get_matcher",
    "iter_fold",
    "list_matchers",
]
