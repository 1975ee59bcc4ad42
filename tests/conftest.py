"""Shared pytest fixtures for utilicurve tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging

import pytest


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
