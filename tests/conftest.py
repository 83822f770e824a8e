"""
Shared fixtures: every test gets its own in-memory trace so assertions
can look at what a component reported without touching the console.
"""

from typing import List, Tuple

import pytest

from restaurant_ordering.core.trace import MemoryTrace
from tests.helpers import CountingPacer


@pytest.fixture
def trace() -> MemoryTrace:
    return MemoryTrace()


@pytest.fixture
def calls() -> List[Tuple[str, str, int]]:
    return []


@pytest.fixture
def pacer() -> CountingPacer:
    return CountingPacer()
