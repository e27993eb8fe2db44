"""caesar-cipher — Caesar cipher engine and command-line tool.

Shifts ASCII letters by a fixed offset; everything else passes through
unchanged.  Not a secure cipher.
"""

from caesar_cipher.core.cipher import (
    brute_force,
    decrypt,
    decrypt_safe,
    encrypt,
    encrypt_safe,
)
from caesar_cipher.version import __version__

__all__: list[str] = [
    "__version__",
    "brute_force",
    "decrypt",
    "decrypt_safe",
    "encrypt",
    "encrypt_safe",
]
