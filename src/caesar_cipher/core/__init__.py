"""Core layer — the pure cipher engine and its value types.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from caesar_cipher.core.cipher import (
    brute_force,
    decrypt,
    decrypt_safe,
    encrypt,
    encrypt_safe,
    validate,
)
from caesar_cipher.core.models import Candidate

__all__: list[str] = [
    "Candidate",
    "brute_force",
    "decrypt",
    "decrypt_safe",
    "encrypt",
    "encrypt_safe",
    "validate",
]
