"""``caesar-cipher brute-force`` — render every candidate decryption.

The core enumerator does the work; this module only renders its output.
A Rich table is used when Rich is installed, plain ``Shift NN: text``
lines otherwise.  Either way the listing goes to stdout, since it is the
command's result.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from caesar_cipher.core.cipher import brute_force
from caesar_cipher.core.models import Candidate


def _format_candidate_line(candidate: Candidate) -> str:
    """Render one candidate as ``"Shift  3: Hello World"``."""
    return f"Shift {candidate.shift:2}: {candidate.text}"


def _print_plain_candidates(text: str, candidates: Iterable[Candidate]) -> None:
    """Render the listing without Rich."""
    print("\n=== Brute Force Decryption ===", file=sys.stdout)
    print(f"Original: {text}", file=sys.stdout)
    print("Trying all possible shifts:", file=sys.stdout)
    for candidate in candidates:
        print(_format_candidate_line(candidate), file=sys.stdout)


def _print_rich_candidates(text: str, candidates: Iterable[Candidate]) -> None:
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text

    table = Table(
        title="Brute Force Decryption",
        caption=Text(f"Original: {text}"),
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Shift", justify="right", style="bold", min_width=5)
    table.add_column("Candidate", overflow="fold")

    for candidate in candidates:
        table.add_row(str(candidate.shift), Text(candidate.text))

    Console().print(table)


def run_brute_force(text: str) -> None:
    """Print all 25 non-identity decryptions of *text* in ascending shift order."""
    candidates = list(brute_force(text))
    try:
        import rich.table  # noqa: F401
    except ModuleNotFoundError:
        _print_plain_candidates(text, candidates)
        return
    _print_rich_candidates(text, candidates)
