"""Shared pytest fixtures and configuration for the caesar-cipher test suite.

Guidelines
----------
* questionary is always mocked.
* Core tests must be pure.
* File I/O only under ``tmp_path``.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from caesar_cipher.utils.log import ROOT_LOGGER_NAME
from caesar_cipher.utils.settings import DEFAULT_SHIFT_ENV, MAX_INPUT_SIZE_ENV


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DEFAULT_SHIFT_ENV, raising=False)
    monkeypatch.delenv(MAX_INPUT_SIZE_ENV, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    log = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)


@pytest.fixture
def hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail as if the package were missing."""
    for name in ("rich", "rich.console", "rich.table", "rich.text", "rich.logging"):
        monkeypatch.setitem(sys.modules, name, None)


@pytest.fixture
def hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make ``import questionary`` fail as if the package were missing."""
    monkeypatch.setitem(sys.modules, "questionary", None)
