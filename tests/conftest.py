"""
Shared test fixtures for boxtable tests.
Resets module-level config state between tests.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with debug logging off."""
    from boxtable import config

    monkeypatch.setattr(config, "DEBUG_LOG_ENABLED", False)
