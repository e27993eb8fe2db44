"""Custom exception hierarchy for caesar-cipher.

All exceptions that cross layer boundaries must inherit from
:class:`CaesarCipherError`.  Raw ``OSError`` instances raised while
reading or writing files must NEVER propagate beyond the infrastructure
layer; they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CaesarCipherError
├── CipherError
│   ├── EmptyTextError
│   └── InvalidShiftError
├── InputSourceError
│   └── InputTooLargeError
├── OutputWriteError
└── EnvironmentError
"""

from __future__ import annotations


class CaesarCipherError(Exception):
    """Base exception for all caesar-cipher errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Cipher validation -----------------------------------------------------

class CipherError(CaesarCipherError):
    """Raised by the validating cipher API when its input is rejected."""


class EmptyTextError(CipherError):
    """Raised when the input text has zero characters."""

    def __init__(self) -> None:
        super().__init__("Input text cannot be empty")


class InvalidShiftError(CipherError):
    """Raised when the raw shift magnitude exceeds the allowed bound."""

    def __init__(self, shift: int, bound: int) -> None:
        super().__init__(
            f"Invalid shift value: Shift value {shift} is out of range "
            f"(-{bound} to {bound})",
            hint="Pass a shift between "
            f"-{bound} and {bound}, or drop --safe to let it wrap.",
        )
        self.shift: int = shift
        """The offending shift, before any normalization."""


# --- Input / output --------------------------------------------------------

class InputSourceError(CaesarCipherError):
    """Raised when input text cannot be obtained from the requested source."""


class InputTooLargeError(InputSourceError):
    """Raised when the input exceeds the configured size limit."""


class OutputWriteError(CaesarCipherError):
    """Raised when the result cannot be written to the output file."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CaesarCipherError):
    """Raised when an optional runtime dependency is not available."""
