"""``caesar-cipher demo`` — a short tour of the cipher engine.

Shows a basic round trip, mixed-case text with digits and punctuation,
and how the validating API reports bad input.
"""

from __future__ import annotations

from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.console import console, out
from caesar_cipher.core.cipher import decrypt, encrypt, encrypt_safe
from caesar_cipher.exceptions import CipherError


def _safe_line(label: str, text: str, shift: int) -> str:
    try:
        return f"{label}: {encrypt_safe(text, shift)}"
    except CipherError as exc:
        return f"Error: {exc}"


def run_demo() -> int:
    """Print the walkthrough and return :data:`exit_codes.SUCCESS`."""
    console.print("[bold]=== Caesar Cipher Demo ===[/bold]")
    console.print("[dim]Run with --help to see CLI options[/dim]")

    text = "I Love You."
    encrypted = encrypt(text, 3)
    out.print("=== Basic Features ===")
    out.print(f"Original: {text}")
    out.print(f"Encrypted: {encrypted}")
    out.print(f"Decrypted (encrypt): {encrypt(encrypted, -3)}")
    out.print(f"Decrypted (decrypt): {decrypt(encrypted, 3)}")

    mixed = "Hello World! 123"
    encrypted_mixed = encrypt(mixed, 5)
    out.print("")
    out.print("=== Mixed Case Test ===")
    out.print(f"Original: {mixed}")
    out.print(f"Encrypted: {encrypted_mixed}")
    out.print(f"Decrypted: {decrypt(encrypted_mixed, 5)}")

    out.print("")
    out.print("=== Error Handling Test ===")
    out.print(_safe_line("Valid encryption", "Test Message", 3))
    out.print(_safe_line("Empty text encryption", "", 3))
    out.print(_safe_line("Invalid shift result", "Test", 30))

    return exit_codes.SUCCESS
