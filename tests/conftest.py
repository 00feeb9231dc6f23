"""Shared pytest fixtures."""
from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from kvcollection.config import clear_config_cache


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Undo structlog configuration and cached settings left by CLI runs."""
    yield
    structlog.reset_defaults()
    clear_config_cache()
