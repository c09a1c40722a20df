from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC = ROOT / "python"

if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))
else:
    sys.path.remove(str(PYTHON_SRC))
    sys.path.insert(0, str(PYTHON_SRC))


@pytest.fixture(autouse=True)
def _isolated_default_hook(monkeypatch: pytest.MonkeyPatch):
    from ariaguard.hook import set_default_hook

    monkeypatch.delenv("ARIAGUARD_DEV", raising=False)
    set_default_hook(None)
    yield
    set_default_hook(None)


@pytest.fixture
def sink():
    from ariaguard.diagnostics import RecordingSink

    return RecordingSink()


@pytest.fixture
def validator(sink):
    from ariaguard.validator import AttributeNameValidator

    return AttributeNameValidator(sink=sink)
