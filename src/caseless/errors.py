"""Exception hierarchy."""

from __future__ import annotations


class CaselessError(Exception):
    """Base class for errors raised by this package."""


class CaseFoldingDataError(CaselessError, ValueError):
    """Case-folding data is malformed or violates the table invariants."""


class MalformedTextError(CaselessError, ValueError):
    """Input could not be turned into a valid sequence of code points."""
