from __future__ import annotations

import pytest

from fakes import T0, T1
from models.check import QueryWindow


@pytest.fixture
def window() -> QueryWindow:
    return QueryWindow(start=T0, end=T1)
