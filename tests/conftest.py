from __future__ import annotations

import pytest

from fakes import FakeStats


@pytest.fixture
def proc_root(tmp_path):
    root = tmp_path / "proc"
    root.mkdir()
    return root


@pytest.fixture
def fake_stats() -> FakeStats:
    return FakeStats()
