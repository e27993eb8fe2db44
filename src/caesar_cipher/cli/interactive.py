"""``caesar-cipher interactive`` — prompt-driven encrypt/decrypt loop.

The user picks an operation with questionary's arrow-key selector, then
types the text and (for encrypt/decrypt) a shift.  The loop ends on
"Quit" or when a prompt is cancelled (Esc / Ctrl+C makes questionary
return ``None``).

All display-related logic lives here; the transformation itself is
delegated to the core engine.
"""

from __future__ import annotations

from typing import Any

from caesar_cipher.cli.brute_force import run_brute_force
from caesar_cipher.cli.console import console, out
from caesar_cipher.core.cipher import decrypt, encrypt
from caesar_cipher.exceptions import EnvironmentError
from caesar_cipher.utils.settings import MAX_SHIFT, MIN_SHIFT, get_default_shift

ENCRYPT = "encrypt"
DECRYPT = "decrypt"
BRUTE_FORCE = "brute-force"
QUIT = "quit"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Shift parsing (pure)
# ---------------------------------------------------------------------------

def validate_shift_input(raw: str, default: int | None = None) -> tuple[int, str | None]:
    """Parse a typed shift value.

    Returns ``(shift, warning)``.  A blank answer silently yields the
    default.  An integer outside ``-25..25`` is kept (the unchecked
    cipher normalizes it) but comes with a warning.  Anything that is
    not an integer falls back to the default with a warning.
    """
    if default is None:
        default = get_default_shift()

    stripped = raw.strip()
    if not stripped:
        return default, None

    try:
        shift = int(stripped)
    except ValueError:
        return default, f"Invalid shift value, using default ({default})"

    if not MIN_SHIFT <= shift <= MAX_SHIFT:
        return shift, (
            f"Warning: shift {shift} is outside the typical range "
            f"({MIN_SHIFT} to {MAX_SHIFT}). Value will be normalized."
        )
    return shift, None


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _ask_operation(questionary: Any) -> str | None:
    choices = [
        questionary.Choice(title="Encrypt", value=ENCRYPT),
        questionary.Choice(title="Decrypt", value=DECRYPT),
        questionary.Choice(title="Brute force", value=BRUTE_FORCE),
        questionary.Choice(title="Quit", value=QUIT),
    ]
    return questionary.select(
        "Choose operation:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()


def _ask_shift(questionary: Any) -> int | None:
    default = get_default_shift()
    raw: str | None = questionary.text(
        f"Enter shift value (default: {default}):",
    ).ask()
    if raw is None:
        return None
    shift, warning = validate_shift_input(raw, default)
    if warning:
        console.print(f"[yellow]{warning}[/yellow]")
    return shift


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_interactive() -> None:
    """Run the prompt loop until the user quits or cancels."""
    questionary = _import_questionary()

    console.print("[bold]=== Caesar Cipher Interactive Mode ===[/bold]")
    console.print("[dim]Choose Quit or press Ctrl+C to exit.[/dim]")

    while True:
        operation = _ask_operation(questionary)
        if operation is None or operation == QUIT:
            console.print("Goodbye!")
            return

        text: str | None = questionary.text(f"Enter text to {operation.replace('-', ' ')}:").ask()
        if text is None:
            console.print("Goodbye!")
            return

        if operation == BRUTE_FORCE:
            run_brute_force(text)
            continue

        shift = _ask_shift(questionary)
        if shift is None:
            console.print("Goodbye!")
            return

        if operation == ENCRYPT:
            out.print(f"Encrypted: {encrypt(text, shift)}")
        else:
            out.print(f"Decrypted: {decrypt(text, shift)}")
