from __future__ import annotations

import io
import sys
from collections import Counter
from pathlib import Path
from typing import List

import pytest

# Tests import `tests.support.harness` and `vnm` without an install.
ROOT_DIR = Path(__file__).resolve().parent.parent
for _entry in (ROOT_DIR, ROOT_DIR / "src"):
    if str(_entry) not in sys.path:
        sys.path.append(str(_entry))

from vnm.runtime import Frame


@pytest.fixture
def sink() -> io.StringIO:
    """In-memory output stream for print/println."""
    return io.StringIO()


@pytest.fixture
def frame(sink: io.StringIO) -> Frame:
    """Evaluation frame writing to `sink` with no context."""
    return Frame(out=sink)


def pytest_collection_modifyitems(items: List[pytest.Item]) -> None:
    # Scenario tables rely on unique ids; a clash would silently shadow a case.
    counts = Counter(item.nodeid for item in items)
    clashes = sorted(nodeid for nodeid, seen in counts.items() if seen > 1)
    if clashes:
        listing = "\n".join(f"  {nodeid}" for nodeid in clashes)
        raise pytest.UsageError(f"scenario ids collide:\n{listing}")
