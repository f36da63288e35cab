from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import FakeExecutor, FakeHost


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def host(tmp_path: Path) -> FakeHost:
    return FakeHost(downloads=tmp_path / "Downloads")
