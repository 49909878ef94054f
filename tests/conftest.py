# tests/conftest.py
"""
Shared pytest configuration.

Test Tiers:
- tier1: pure logic, no I/O
         Run: pytest -m tier1
- tier2: filesystem and CLI tests using tmp_path
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """CLI runs install a root handler; keep tests isolated from each other."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
