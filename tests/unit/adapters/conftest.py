"""Test isolation for respx: routes added via the module-level ``respx`` API
land on the global router, so clear them between tests."""
from __future__ import annotations

from collections.abc import Iterator

import pytest
import respx


@pytest.fixture(autouse=True)
def _reset_global_respx_router() -> Iterator[None]:
    yield
    respx.mock.clear()
    respx.mock.reset()
