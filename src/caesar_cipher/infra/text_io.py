"""Infrastructure: sourcing input text and writing results.

Input comes from exactly one of a literal string, a file, or a prompt
callable supplied by the CLI layer.  Size limits are enforced before
the text reaches the cipher engine.

Rules
-----
* Files are read and written as UTF-8 with line endings preserved.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from caesar_cipher.exceptions import InputSourceError, InputTooLargeError, OutputWriteError
from caesar_cipher.utils.settings import get_max_input_size

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def _check_text_size(text: str, limit: int) -> str:
    if len(text.encode("utf-8")) > limit:
        raise InputTooLargeError(
            f"Input text exceeds maximum size of {limit} bytes",
        )
    return text


def _read_file(path: Path, limit: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise InputSourceError(f"Failed to read file '{path}': {exc}") from exc
    if size > limit:
        raise InputTooLargeError(
            f"Input file '{path}' exceeds maximum size of {limit} bytes",
        )
    try:
        # Decode the bytes directly so "\r\n" survives.
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputSourceError(f"Failed to read file '{path}': {exc}") from exc


def read_input_text(
    text: str | None,
    file: str | Path | None,
    *,
    prompt: Callable[[], str | None] | None = None,
) -> str:
    """Return the input text from whichever single source was given.

    Parameters
    ----------
    text:
        Literal text from the command line, or ``None``.
    file:
        Path of a UTF-8 file to read, or ``None``.
    prompt:
        Callable asked for a line when neither *text* nor *file* is
        given.  Its answer is stripped of surrounding whitespace.

    Raises
    ------
    InputSourceError
        If both sources are given, none is available, or the file
        cannot be read.
    InputTooLargeError
        If the text exceeds the configured size limit.
    """
    limit = get_max_input_size()

    if text is not None and file is not None:
        raise InputSourceError(
            "Cannot specify both text and file",
            hint="Use either --text or --file.",
        )

    if text is not None:
        logger.debug("Reading input from --text (%d chars)", len(text))
        return _check_text_size(text, limit)

    if file is not None:
        path = Path(file)
        logger.debug("Reading input from file %s", path)
        return _read_file(path, limit)

    if prompt is None:
        raise InputSourceError(
            "No input text given.",
            hint="Use --text or --file.",
        )
    answer = prompt()
    if answer is None:
        raise InputSourceError("No input text given.")
    logger.debug("Read input from prompt")
    return _check_text_size(answer.strip(), limit)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def write_output(result: str, output: str | Path | None) -> Path | None:
    """Write *result* to *output* and return its path.

    Returns ``None`` without touching the filesystem when *output* is
    ``None``; the caller is then responsible for printing *result*.

    Raises
    ------
    OutputWriteError
        If the file cannot be written.
    """
    if output is None:
        return None
    path = Path(output)
    try:
        path.write_text(result, encoding="utf-8", newline="")
    except OSError as exc:
        raise OutputWriteError(f"Failed to write file '{path}': {exc}") from exc
    logger.debug("Wrote %d chars to %s", len(result), path)
    return path
