"""Text boundary: turns caller input into valid code point sequences.

The folding core assumes well-formed text. Anything that is not is rejected
here with ``MalformedTextError``; nothing is replaced with U+FFFD.
"""

from __future__ import annotations

from .errors import MalformedTextError


def decode_text(data: bytes, encoding: str = "utf-8") -> str:
    """Strictly decode ``data``."""
    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as e:
        raise MalformedTextError(
            f"input is not valid {encoding}: byte {e.object[e.start]:#04x} at offset {e.start}"
        ) from e


def ensure_text(value: str | bytes, encoding: str = "utf-8") -> str:
    """Return ``value`` as a ``str`` made only of Unicode scalar values.

    Bytes are decoded strictly. Strings are checked for lone surrogates, which
    can appear via ``surrogateescape`` or ``\\ud800``-style literals.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return decode_text(bytes(value), encoding)
    if not isinstance(value, str):
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedTextError(
            f"input contains a lone surrogate U+{ord(value[e.start]):04X} at index {e.start}"
        ) from e
    return value
