"""Value types produced by the cipher engine.

Frozen dataclasses only: no I/O and no behaviour beyond data
access.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Candidate:
    """One brute-force decryption attempt."""

    shift: int
    """Shift that was undone to produce :attr:`text`."""

    text: str
    """The text decrypted under :attr:`shift`."""

    def __iter__(self) -> Iterator[int | str]:
        # Allows ``for shift, text in brute_force(...)``.
        yield self.shift
        yield self.text
