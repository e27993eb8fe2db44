"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and plain
encrypt/decrypt remain functional even when Rich is not installed.

Two proxies are exported:

* :data:`console` — diagnostics, tables and messages on stderr.
* :data:`out` — command results on stdout, written raw (no Rich).
"""

from __future__ import annotations

import sys
from typing import Any

from caesar_cipher.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool, verbatim: bool = False) -> None:
		self._stderr = stderr
		self._verbatim = verbatim

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print.

		Verbatim proxies bypass Rich so tabs, carriage returns and control
		characters reach the stream unaltered.
		"""
		stream = sys.stderr if self._stderr else sys.stdout
		if self._verbatim:
			stream.write(" ".join(str(obj) for obj in objects) + "\n")
			return
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=stream)
			return
		rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False, verbatim=True)
