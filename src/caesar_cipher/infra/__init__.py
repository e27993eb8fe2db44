"""Infrastructure layer — filesystem and terminal input integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~caesar_cipher.exceptions.CaesarCipherError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from caesar_cipher.infra.text_io import read_input_text, write_output

__all__: list[str] = [
    "read_input_text",
    "write_output",
]
