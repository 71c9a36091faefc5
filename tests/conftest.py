from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Dict, Iterator

import pytest
import streamlit as st

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from habit_tracker.state import configure_gateway  # noqa: E402


@pytest.fixture()
def session_state(monkeypatch: pytest.MonkeyPatch) -> Dict[str, object]:
    state: Dict[str, object] = {}
    monkeypatch.setattr(st, "session_state", state, raising=False)
    return state


@pytest.fixture()
def today() -> date:
    return date(2024, 3, 15)


@pytest.fixture(autouse=True)
def _reset_gateway() -> Iterator[None]:
    yield
    configure_gateway(None)
