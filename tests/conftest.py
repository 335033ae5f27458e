"""Shared pytest fixtures for the full textsplice test suite."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_textsplice_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop `TEXTSPLICE_*` variables so CLI defaults do not depend on the host."""

    for key in list(os.environ):
        if key.startswith("TEXTSPLICE_"):
            monkeypatch.delenv(key, raising=False)
