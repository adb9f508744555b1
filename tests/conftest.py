"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Global registry isolation so aliases registered by one test do not leak.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'matcher_aliases' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from matcher_aliases.registry import _MATCHER_REGISTRY  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_registry():
  """Snapshot the matcher registry and restore it after each test."""
  snapshot = dict(_MATCHER_REGISTRY)
  yield
  _MATCHER_REGISTRY.clear()
  _MATCHER_REGISTRY.update(snapshot)
