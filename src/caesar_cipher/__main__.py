"""Allow ``python -m caesar_cipher`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m caesar_cipher`` behaves identically to the
``caesar-cipher`` console script.
"""

from __future__ import annotations

from caesar_cipher.cli.app import cli

if __name__ == "__main__":
    cli()
