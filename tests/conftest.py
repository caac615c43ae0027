from __future__ import annotations

from collections.abc import Iterator

import pytest
from prefect.testing.utilities import prefect_test_harness


@pytest.fixture(scope="session")
def prefect_backend() -> Iterator[None]:
    """Temporary Prefect API and database for tests that run flows."""
    with prefect_test_harness():
        yield
