"""CLI application entry point and command routing for caesar-cipher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~caesar_cipher.exceptions.CaesarCipherError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No cipher logic lives here; all work is delegated to the core and
  infrastructure layers.
* Results go to stdout; messages, errors and logs go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from caesar_cipher.cli import exit_codes
from caesar_cipher.cli.console import console, out
from caesar_cipher.exceptions import CaesarCipherError
from caesar_cipher.utils.log import setup_logging
from caesar_cipher.utils.settings import get_default_shift
from caesar_cipher.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-t", "--text", help="Text to process.")
    parser.add_argument("-f", "--file", help="Read the text from this UTF-8 file.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``encrypt`` / ``decrypt`` — shift text from --text, --file or a prompt
    * ``brute-force``           — list all 25 candidate decryptions
    * ``interactive``           — prompt-driven loop
    * ``demo``                  — short walkthrough
    """
    parser = argparse.ArgumentParser(
        prog="caesar-cipher",
        description="A Caesar cipher encryption/decryption tool.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    default_shift = get_default_shift()

    for name, verb in (("encrypt", "Encrypt"), ("decrypt", "Decrypt")):
        sub = subparsers.add_parser(name, help=f"{verb} text.")
        _add_input_arguments(sub)
        sub.add_argument(
            "-s",
            "--shift",
            type=int,
            default=default_shift,
            help=f"Shift value (default: {default_shift}).",
        )
        sub.add_argument("-o", "--output", help="Write the result to this file.")
        sub.add_argument(
            "--safe",
            action="store_true",
            help="Reject empty text and shifts outside -25..25 instead of wrapping.",
        )

    brute = subparsers.add_parser(
        "brute-force",
        help="Try every shift from 1 to 25.",
    )
    _add_input_arguments(brute)

    subparsers.add_parser("interactive", help="Run the interactive prompt loop.")
    subparsers.add_parser("demo", help="Show a short demonstration.")
    return parser


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def _prompt_for_text() -> str | None:
    """Read input text from piped stdin, or ask for it on a terminal."""
    if not sys.stdin.isatty():
        return sys.stdin.read()

    from caesar_cipher.cli.interactive import _import_questionary

    questionary = _import_questionary()
    return questionary.text("Enter text:").ask()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_cipher(args: argparse.Namespace) -> int:
    """Dispatch ``encrypt`` / ``decrypt``."""
    from caesar_cipher.core.cipher import decrypt, decrypt_safe, encrypt, encrypt_safe
    from caesar_cipher.infra.text_io import read_input_text, write_output

    text = read_input_text(args.text, args.file, prompt=_prompt_for_text)

    if args.command == "encrypt":
        operation = encrypt_safe if args.safe else encrypt
    else:
        operation = decrypt_safe if args.safe else decrypt

    logger.debug("%s with shift=%d safe=%s", args.command, args.shift, args.safe)
    result = operation(text, args.shift)

    path = write_output(result, args.output)
    if path is None:
        out.print(result)
    else:
        console.print(f"Result written to file: {path}")
    return exit_codes.SUCCESS


def _handle_brute_force(args: argparse.Namespace) -> int:
    """Dispatch ``brute-force``."""
    from caesar_cipher.cli.brute_force import run_brute_force
    from caesar_cipher.infra.text_io import read_input_text

    text = read_input_text(args.text, args.file, prompt=_prompt_for_text)
    run_brute_force(text)
    return exit_codes.SUCCESS


def _handle_interactive() -> int:
    """Dispatch ``interactive``."""
    from caesar_cipher.cli.interactive import run_interactive

    run_interactive()
    return exit_codes.SUCCESS


def _handle_demo() -> int:
    """Dispatch ``demo``."""
    from caesar_cipher.cli.demo import run_demo

    return run_demo()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the caesar-cipher CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command in ("encrypt", "decrypt"):
        return _handle_cipher(args)
    if args.command == "brute-force":
        return _handle_brute_force(args)
    if args.command == "interactive":
        return _handle_interactive()
    return _handle_demo()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CaesarCipherError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
