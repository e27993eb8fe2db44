"""The Caesar cipher engine.

Every function here is a pure mapping from ``(text, shift)`` to text.
Only ASCII letters move; digits, punctuation, whitespace and non-Latin
characters are copied through unchanged.

Two flavours are exposed:

* :func:`encrypt` / :func:`decrypt` accept any integer shift and reduce
  it modulo 26.  They never fail.
* :func:`encrypt_safe` / :func:`decrypt_safe` reject empty text and raw
  shifts outside ``-25..25`` before doing any work, so that a shift of
  26 is reported instead of silently wrapping to the identity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from caesar_cipher.core.models import Candidate
from caesar_cipher.exceptions import EmptyTextError, InvalidShiftError
from caesar_cipher.utils.settings import (
    ALPHABET_SIZE,
    LOWERCASE_BASE,
    MAX_BRUTE_FORCE_SHIFT,
    MAX_SHIFT,
    UPPERCASE_BASE,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Character transform
# ---------------------------------------------------------------------------

def _shift_char(char: str, shift: int) -> str:
    if "A" <= char <= "Z":
        base = UPPERCASE_BASE
    elif "a" <= char <= "z":
        base = LOWERCASE_BASE
    else:
        return char
    offset = ((ord(char) - base + shift) % ALPHABET_SIZE + ALPHABET_SIZE) % ALPHABET_SIZE
    return chr(base + offset)


def _transform(text: str, shift: int) -> str:
    normalized = shift % ALPHABET_SIZE
    if normalized == 0:
        return text
    return "".join(_shift_char(char, normalized) for char in text)


# ---------------------------------------------------------------------------
# Unchecked API
# ---------------------------------------------------------------------------

def encrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter in *text* forward by *shift* positions.

    *shift* may be any integer; ``27`` behaves like ``1`` and ``-1`` like
    ``25``.  Empty input yields an empty string.
    """
    return _transform(text, shift)


def decrypt(text: str, shift: int) -> str:
    """Undo :func:`encrypt`, equivalent to ``encrypt(text, -shift)``."""
    return _transform(text, -shift)


# ---------------------------------------------------------------------------
# Validating API
# ---------------------------------------------------------------------------

def validate(text: str, shift: int) -> None:
    """Check *text* and the raw *shift* against the validating API's rules.

    Raises
    ------
    EmptyTextError
        If *text* has no characters.
    InvalidShiftError
        If ``abs(shift)`` exceeds 25.  The bound applies before modular
        reduction, so ±26 is rejected even though it wraps to 0.
    """
    if not text:
        logger.debug("Rejecting empty text")
        raise EmptyTextError()
    if abs(shift) > MAX_SHIFT:
        logger.debug("Rejecting out-of-range shift %d", shift)
        raise InvalidShiftError(shift, MAX_SHIFT)


def encrypt_safe(text: str, shift: int) -> str:
    """Validated :func:`encrypt`.

    Raises
    ------
    EmptyTextError
        If *text* is empty.
    InvalidShiftError
        If ``abs(shift) > 25``.
    """
    validate(text, shift)
    return encrypt(text, shift)


def decrypt_safe(text: str, shift: int) -> str:
    """Validated :func:`decrypt`; raises the same errors as :func:`encrypt_safe`."""
    validate(text, shift)
    return decrypt(text, shift)


# ---------------------------------------------------------------------------
# Brute force
# ---------------------------------------------------------------------------

def brute_force(text: str) -> Iterator[Candidate]:
    """Lazily yield the decryption of *text* under every shift 1..25.

    Shift 0 is skipped since it is the identity.  Each call returns a
    fresh generator; picking the meaningful candidate is left to the
    caller.
    """
    for shift in range(1, MAX_BRUTE_FORCE_SHIFT + 1):
        yield Candidate(shift=shift, text=decrypt(text, shift))
