"""Shared fixtures for the json-equivalence test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Restore the library's silent logging state after every test.

    ``configure_logging`` replaces global loguru sinks; without this reset a
    CLI test would leave a stderr sink behind for the rest of the session.
    """
    yield
    logger.remove()
    logger.disable("json_equivalence")
