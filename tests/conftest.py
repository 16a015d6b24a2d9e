"""Root conftest for all tests - make the src/ package importable without installation."""

import sys
from pathlib import Path

import pytest

src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from perfpath.system.log_system import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def unconfigured_logging():
    """Every test starts and ends with no perfpath log output attached."""
    reset_logging()
    yield
    reset_logging()
