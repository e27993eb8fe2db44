"""Centralised constants and environment-driven settings.

All tunable values live here so that no module hardcodes them.  Two of
them may be overridden from the environment; callers must go through
the accessor functions instead of reading ``os.environ`` directly.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

ALPHABET_SIZE: int = 26
"""Number of letters in each ASCII alphabet."""

MAX_SHIFT: int = 25
"""Largest shift magnitude accepted by the validating API."""

MIN_SHIFT: int = -MAX_SHIFT
"""Smallest shift accepted by the validating API."""

UPPERCASE_BASE: int = ord("A")
LOWERCASE_BASE: int = ord("a")

MAX_BRUTE_FORCE_SHIFT: int = 25
"""Highest shift tried by the brute-force enumerator."""

DEFAULT_SHIFT: int = 3
"""Shift used when none is given or the given one cannot be parsed."""

MAX_INPUT_SIZE: int = 10 * 1024 * 1024
"""Upper bound on input size, in UTF-8 bytes."""

DEFAULT_SHIFT_ENV: str = "CAESAR_CIPHER_DEFAULT_SHIFT"
MAX_INPUT_SIZE_ENV: str = "CAESAR_CIPHER_MAX_INPUT_SIZE"


def _optional_int(key: str, default: int) -> int:
    """Read *key* from the environment as ``int``; *default* if unset or invalid."""
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", key, raw)
        return default


def get_default_shift() -> int:
    """Return the default shift, honouring ``CAESAR_CIPHER_DEFAULT_SHIFT``."""
    return _optional_int(DEFAULT_SHIFT_ENV, DEFAULT_SHIFT)


def get_max_input_size() -> int:
    """Return the input size limit, honouring ``CAESAR_CIPHER_MAX_INPUT_SIZE``.

    Non-positive overrides are ignored.
    """
    value = _optional_int(MAX_INPUT_SIZE_ENV, MAX_INPUT_SIZE)
    if value <= 0:
        logger.warning("Ignoring %s=%d: must be positive", MAX_INPUT_SIZE_ENV, value)
        return MAX_INPUT_SIZE
    return value
