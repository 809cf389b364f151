"""Shared pytest fixtures for the full demosdesk test suite."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_demosdesk_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `DEMOSDESK_*` variables from leaking into config resolution."""

    for key in list(os.environ):
        if key.startswith("DEMOSDESK_"):
            monkeypatch.delenv(key, raising=False)
